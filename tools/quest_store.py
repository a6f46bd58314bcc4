"""
QuestStore — Authoritative collection of a user's quests.

QuestStorePort is the contract the progression engine consumes. Any
backend (database, REST client, browser storage) can sit behind it.
InMemoryQuestStore is the reference implementation: it keeps quests in
insertion order and hands out copies, so callers can never mutate the
store's state except through toggle_quest_status().
"""

import logging
from typing import Dict, Iterable, List, Protocol
from uuid import uuid4

from models.quests import Quest, QuestStatus
from tools.errors import QuestNotFoundError

logger = logging.getLogger("QuestStore")


class QuestStorePort(Protocol):
    """Read/write contract of a quest store."""

    @property
    def loading(self) -> bool:
        """True while the snapshot is being fetched."""
        ...

    def list_quests(self) -> List[Quest]:
        """Current snapshot, in store order."""
        ...

    def add_quest(self, title: str, category: str, xp_reward: int) -> Quest:
        """Create and persist a pending quest. The store assigns the id."""
        ...

    def toggle_quest_status(self, quest_id: str) -> None:
        """Flip pending <-> completed and persist."""
        ...


class InMemoryQuestStore:
    """Process-local quest store.

    Args:
        quests: Optional initial snapshot, kept in the given order.
    """

    def __init__(self, quests: Iterable[Quest] = ()):
        self._quests: Dict[str, Quest] = {}
        self._loading: bool = False
        self.load(quests)

    @property
    def loading(self) -> bool:
        return self._loading

    def begin_loading(self) -> None:
        """Mark the snapshot as being fetched."""
        self._loading = True

    def load(self, quests: Iterable[Quest]) -> None:
        """Replace the snapshot and clear the loading flag.

        Raises ValueError if two quests share an id; the current snapshot
        is left untouched.
        """
        snapshot: Dict[str, Quest] = {}
        for quest in quests:
            if quest.id in snapshot:
                logger.error(f"Rejected snapshot: duplicate quest id {quest.id}")
                raise ValueError(f"Duplicate quest id in snapshot: {quest.id}")
            snapshot[quest.id] = quest.model_copy()
        self._quests = snapshot
        self._loading = False
        logger.debug(f"Loaded {len(self._quests)} quests")

    @property
    def count(self) -> int:
        return len(self._quests)

    def list_quests(self) -> List[Quest]:
        return [quest.model_copy() for quest in self._quests.values()]

    def get_quest(self, quest_id: str) -> Quest:
        """Return a copy of one quest. Raises QuestNotFoundError if missing."""
        quest = self._quests.get(quest_id)
        if quest is None:
            raise QuestNotFoundError(quest_id)
        return quest.model_copy()

    def add_quest(self, title: str, category: str, xp_reward: int) -> Quest:
        quest = Quest(
            id=str(uuid4()),
            title=title,
            category=category,
            xp_reward=xp_reward,
            status=QuestStatus.PENDING,
        )
        self._quests[quest.id] = quest
        logger.info(f"Added quest '{quest.title}' (+{quest.xp_reward} XP, id={quest.id[:8]})")
        return quest.model_copy()

    def toggle_quest_status(self, quest_id: str) -> None:
        quest = self._quests.get(quest_id)
        if quest is None:
            raise QuestNotFoundError(quest_id)
        new_status = quest.toggle_status()
        logger.info(f"Quest {quest_id[:8]} is now {new_status.value}")
