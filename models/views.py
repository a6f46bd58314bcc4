"""
View-models — display-ready shapes handed to the presentation layer.

Nothing here is stored. Every instance is recomputed from the store's
current snapshot.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from models.quests import RepeatFrequency


class QuestTab(str, Enum):
    """The two named UI regions of the Quest Center."""
    USER_QUESTS = "user-quests"
    BOSS_QUESTS = "boss-quests"


class BossQuestState(str, Enum):
    """What the boss-quest region shows."""
    LOCKED = "locked"
    PENDING_GENERATION = "pending-generation"
    AVAILABLE = "available"


class PageStatus(str, Enum):
    REDIRECT = "redirect"
    LOADING = "loading"
    READY = "ready"


class QuestViewModel(BaseModel):
    """One row in the user-quests list."""

    id: str
    title: str
    category: str
    completed: bool
    xp: int
    repeat_frequency: RepeatFrequency = RepeatFrequency.DAILY
    repeat_label: str = "Daily"


class BossQuest(BaseModel):
    """A generated high-tier challenge."""

    title: str = Field(min_length=1)
    description: str = ""
    category: str = ""
    xp_reward: int = Field(default=0, ge=0)


class BossQuestBatch(BaseModel):
    """The only shape accepted from a boss-quest generator.

    If any entry fails validation the whole batch is rejected.
    """

    boss_quests: List[BossQuest] = []


class QuestSummary(BaseModel):
    """XP totals read off the current statuses. Nothing accumulates."""

    total: int = 0
    completed: int = 0
    earned_xp: int = 0
    available_xp: int = 0


class UserQuestsRegion(BaseModel):
    quests: List[QuestViewModel] = []
    summary: QuestSummary = Field(default_factory=QuestSummary)

    @property
    def is_empty(self) -> bool:
        return not self.quests


class BossQuestsRegion(BaseModel):
    state: BossQuestState = BossQuestState.LOCKED
    boss_quests: List[BossQuest] = []
    call_to_action: Optional[str] = None


class QuestCenterPage(BaseModel):
    """Everything the host needs to draw the Quest Center.

    Regions are only populated when `status` is READY.
    """

    status: PageStatus
    redirect_to: Optional[str] = None
    active_tab: QuestTab = QuestTab.USER_QUESTS
    user_quests: Optional[UserQuestsRegion] = None
    boss_quests: Optional[BossQuestsRegion] = None
