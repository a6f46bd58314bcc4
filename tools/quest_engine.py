"""
Quest Progression Engine — projection and lifecycle rules for user quests.

Pure Python + Pydantic, no I/O. The store is the only source of truth:
every projection reads its current snapshot, nothing is cached here.

XP is read off the current status. There is no ledger and no
XP-awarding transaction; toggling a quest back to pending simply stops
counting its reward.
"""

import logging
from typing import Iterable, List, Optional

from models.quests import Quest, QuestStatus, RepeatFrequency
from models.views import QuestSummary, QuestViewModel
from tools.errors import QuestNotFoundError
from tools.quest_store import QuestStorePort

logger = logging.getLogger("QuestEngine")

REPEAT_LABELS = {
    RepeatFrequency.DAILY: "Daily",
    RepeatFrequency.WEEKLY: "Weekly",
    RepeatFrequency.MONTHLY: "Monthly",
    RepeatFrequency.ONE_TIME: "One-time",
}


def repeat_label(frequency) -> str:
    """Display label for a repeat frequency. Anything unrecognised is 'Custom'."""
    try:
        frequency = RepeatFrequency(frequency)
    except ValueError:
        return "Custom"
    return REPEAT_LABELS.get(frequency, "Custom")


def project_quest(quest: Quest) -> QuestViewModel:
    # The stored frequency is not surfaced yet: every quest displays as daily.
    frequency = RepeatFrequency.DAILY
    return QuestViewModel(
        id=quest.id,
        title=quest.title,
        category=quest.category,
        completed=quest.status == QuestStatus.COMPLETED,
        xp=quest.xp_reward,
        repeat_frequency=frequency,
        repeat_label=repeat_label(frequency),
    )


def project_for_display(quests: Iterable[Quest]) -> List[QuestViewModel]:
    """Project stored quests into view-models.

    Stable: one view-model per quest, in input order. An empty input gives
    an empty list, which the host renders as the empty state.
    """
    return [project_quest(quest) for quest in quests]


def summarize(view_models: Iterable[QuestViewModel]) -> QuestSummary:
    """Count quests and sum XP by current completion state."""
    summary = QuestSummary()
    for vm in view_models:
        summary.total += 1
        if vm.completed:
            summary.completed += 1
            summary.earned_xp += vm.xp
        else:
            summary.available_xp += vm.xp
    return summary


def validate_new_quest(title, xp_reward, category="") -> Optional[str]:
    """Return the reason a quest cannot be created, or None if it can.

    A None category is treated as "".
    """
    if not isinstance(title, str) or not title.strip():
        return "title must not be empty"
    if category is not None and not isinstance(category, str):
        return "category must be a string"
    # bool is an int subclass; True is not an XP amount.
    if isinstance(xp_reward, bool) or not isinstance(xp_reward, int):
        return "xp_reward must be an integer"
    if xp_reward < 0:
        return "xp_reward must not be negative"
    return None


class QuestProgressionEngine:
    """Forwards user intents to the store and projects its snapshot.

    Args:
        store: Any QuestStorePort implementation.
    """

    def __init__(self, store: QuestStorePort):
        self.store = store

    def project(self) -> List[QuestViewModel]:
        """Project the store's current snapshot."""
        return project_for_display(self.store.list_quests())

    def summary(self) -> QuestSummary:
        return summarize(self.project())

    def toggle_completion(self, quest_id: str) -> None:
        """Invert one quest's status. Unknown ids are ignored.

        Each call flips the status; it does not set a target state.
        """
        if not any(quest.id == quest_id for quest in self.store.list_quests()):
            logger.debug(f"Toggle ignored, no quest with id {quest_id}")
            return
        try:
            self.store.toggle_quest_status(quest_id)
        except QuestNotFoundError:
            # Removed between the snapshot read and the write.
            logger.debug(f"Toggle ignored, quest {quest_id} disappeared")

    def create_quest(self, title: str, category: str, xp_reward: int) -> Optional[Quest]:
        """Create a pending quest through the store.

        Returns:
            The new Quest, or None if the input was refused. Refused input
            never reaches the store and is never coerced.
        """
        reason = validate_new_quest(title, xp_reward, category)
        if reason:
            logger.warning(f"Refused to create quest {title!r}: {reason}")
            return None
        return self.store.add_quest(title.strip(), category or "", xp_reward)
