"""
Eligibility Gate — decides whether boss quests are unlocked.

Pure functions, no state. A profile counts as filled in once any one of
username, character class or avatar differs from a fresh profile.
"""

from typing import Optional, Sequence

from models.profile import DEFAULT_AVATAR_EMOJI, UserProfile
from models.views import BossQuest, BossQuestState


def has_profile_data(profile: Optional[UserProfile], default_emoji: str = DEFAULT_AVATAR_EMOJI) -> bool:
    if profile is None:
        return False
    return bool(
        profile.username
        or profile.character_class
        or profile.avatar_emoji != default_emoji
    )


def is_boss_quest_eligible(profile: Optional[UserProfile], default_emoji: str = DEFAULT_AVATAR_EMOJI) -> bool:
    """True if the profile unlocks boss quests."""
    return has_profile_data(profile, default_emoji)


def boss_quest_state(eligible: bool, boss_quests: Sequence[BossQuest] = ()) -> BossQuestState:
    """Map eligibility and generated content to the boss-region state.

    AVAILABLE is reachable only when a generator has produced something.
    """
    if not eligible:
        return BossQuestState.LOCKED
    if not boss_quests:
        return BossQuestState.PENDING_GENERATION
    return BossQuestState.AVAILABLE
