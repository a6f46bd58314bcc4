"""
User profile and auth context — the inputs to the boss-quest gate.
"""

from typing import Optional
from pydantic import BaseModel

# Avatar assigned to every new profile.
DEFAULT_AVATAR_EMOJI = "🎯"


class UserProfile(BaseModel):
    """Schema for a user's public profile."""

    username: Optional[str] = ""
    character_class: Optional[str] = ""
    avatar_emoji: Optional[str] = DEFAULT_AVATAR_EMOJI

    model_config = {"extra": "allow"}


class AuthContext(BaseModel):
    """Snapshot of the auth/profile collaborator, passed in explicitly.

    `profile` is None until the user has created one.
    """

    user_id: Optional[str] = None
    profile: Optional[UserProfile] = None
    loading: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None
