"""
Quest schema — a user's self-defined task with a fixed XP reward.

Every quest the store hands out passes through this model first.
`id` and `xp_reward` are frozen: assigning them after creation raises a
ValidationError. Only `status` transitions.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator


class QuestStatus(str, Enum):
    """Completion state of a quest. No intermediate states."""
    PENDING = "pending"
    COMPLETED = "completed"


class RepeatFrequency(str, Enum):
    """How often a quest recurs."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ONE_TIME = "one-time"
    CUSTOM = "custom"


def _require_title(v: str) -> str:
    title = v.strip()
    if not title:
        raise ValueError("title must not be empty")
    return title


class Quest(BaseModel):
    """Schema for a stored Quest."""

    id: str = Field(frozen=True, min_length=1)
    title: str
    category: str = ""
    xp_reward: StrictInt = Field(ge=0, frozen=True)
    status: QuestStatus = QuestStatus.PENDING
    repeat_frequency: RepeatFrequency = RepeatFrequency.DAILY
    custom_days: Optional[StrictInt] = Field(default=None, gt=0)

    model_config = {"validate_assignment": True}

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _require_title(v)

    @model_validator(mode="after")
    def custom_days_only_for_custom(self):
        if self.custom_days is not None and self.repeat_frequency != RepeatFrequency.CUSTOM:
            raise ValueError("custom_days is only allowed when repeat_frequency is 'custom'")
        return self

    @property
    def is_completed(self) -> bool:
        return self.status == QuestStatus.COMPLETED

    def toggle_status(self) -> QuestStatus:
        """Invert the status once and return the new value."""
        self.status = QuestStatus.PENDING if self.is_completed else QuestStatus.COMPLETED
        return self.status


class QuestForm(BaseModel):
    """The payload submitted by the "Add Quest" form.

    Carries the repeat schedule fields even though only title, category and
    xp are forwarded to the store today.
    """

    title: str
    category: str = ""
    xp: StrictInt = Field(ge=0)
    repeat_frequency: RepeatFrequency = RepeatFrequency.DAILY
    custom_days: Optional[StrictInt] = Field(default=None, gt=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _require_title(v)
