"""
Quest Center Error Types — Structured exception hierarchy.

The core classifies most failures as valid alternate states, so these are
only raised at the edges: the store when asked about a quest it does not
hold, and the boss-quest generator when the model call itself fails.
"""


class QuestCenterError(Exception):
    """Base class for all Quest Center errors."""
    pass


class QuestNotFoundError(QuestCenterError):
    """The store holds no quest with the requested id."""

    def __init__(self, quest_id: str):
        super().__init__(f"Quest not found: {quest_id}")
        self.quest_id = quest_id


class BossQuestGenerationError(QuestCenterError):
    """The generator could not produce a valid boss-quest batch."""
    pass
