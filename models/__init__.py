"""
Pydantic v2 data models — the contract for all quest state.

Every quest the store creates passes through these models first.
If validation fails, nothing is stored.
"""

from models.quests import Quest, QuestForm, QuestStatus, RepeatFrequency
from models.profile import AuthContext, UserProfile, DEFAULT_AVATAR_EMOJI
from models.views import (
    BossQuest,
    BossQuestBatch,
    BossQuestState,
    BossQuestsRegion,
    PageStatus,
    QuestCenterPage,
    QuestSummary,
    QuestTab,
    QuestViewModel,
    UserQuestsRegion,
)

__all__ = [
    "Quest",
    "QuestForm",
    "QuestStatus",
    "RepeatFrequency",
    "AuthContext",
    "UserProfile",
    "DEFAULT_AVATAR_EMOJI",
    "BossQuest",
    "BossQuestBatch",
    "BossQuestState",
    "BossQuestsRegion",
    "PageStatus",
    "QuestCenterPage",
    "QuestSummary",
    "QuestTab",
    "QuestViewModel",
    "UserQuestsRegion",
]
