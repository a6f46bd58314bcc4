"""
Category navigation — which Quest Center tab is showing.
"""

import logging
from typing import Union

from models.views import QuestTab

logger = logging.getLogger("Navigation")


class QuestCenterNavigation:
    """Two-state tab selector, starting on the user's own quests.

    There are no guards: the boss tab can always be selected, even while
    boss quests are locked (the lock is shown inside the tab).
    """

    def __init__(self):
        self._active: QuestTab = QuestTab.USER_QUESTS

    @property
    def active_tab(self) -> QuestTab:
        return self._active

    def select(self, tab: Union[QuestTab, str]) -> QuestTab:
        """Switch to `tab` and return it. Raises ValueError for unknown names."""
        self._active = QuestTab(tab)
        logger.debug(f"Active tab: {self._active.value}")
        return self._active
