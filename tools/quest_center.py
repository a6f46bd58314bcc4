"""
QuestCenter — Composes the engine, the gate and tab navigation for a host.

The host (web view, bot, TUI...) owns one QuestCenter per signed-in user,
passes in the store and the auth context explicitly, calls render() after
every change and forwards user intents back through the methods below.
No module-level state: two QuestCenters never share anything, including
the rate limiter of their boss-quest generators.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from agents.boss_quest_generator import build_boss_quest_generator
from models.profile import AuthContext, DEFAULT_AVATAR_EMOJI
from models.quests import Quest, QuestForm
from models.views import (
    BossQuest,
    BossQuestState,
    BossQuestsRegion,
    PageStatus,
    QuestCenterPage,
    QuestTab,
    UserQuestsRegion,
)
from tools.eligibility import boss_quest_state, is_boss_quest_eligible
from tools.navigation import QuestCenterNavigation
from tools.quest_engine import QuestProgressionEngine, summarize
from tools.quest_store import QuestStorePort
from tools.settings import Settings

logger = logging.getLogger("QuestCenter")

AUTH_ROUTE = "/auth"
PROFILE_ROUTE = "/dashboard"


class QuestCenter:
    """Page-level state for the Quest Center.

    Args:
        store: The user's quest store.
        auth: Current auth/profile snapshot.
        generator: Optional BossQuestGenerator. Without one, boss quests
            never leave the pending-generation state.
        default_avatar_emoji: The avatar a fresh profile starts with. A
            profile still showing it has not been filled in.
    """

    def __init__(self, store: QuestStorePort, auth: AuthContext, generator=None,
                 default_avatar_emoji: str = DEFAULT_AVATAR_EMOJI):
        self.store = store
        self.auth = auth
        self.generator = generator
        self.default_avatar_emoji = default_avatar_emoji
        self.engine = QuestProgressionEngine(store)
        self.navigation = QuestCenterNavigation()
        self._boss_quests: List[BossQuest] = []

    @classmethod
    def from_settings(cls, store: QuestStorePort, auth: AuthContext, settings: Settings,
                      limiter=None) -> "QuestCenter":
        """Wire a QuestCenter from host settings.

        The Gemini generator is attached only when an API key is configured.
        """
        return cls(
            store,
            auth,
            generator=build_boss_quest_generator(settings, limiter=limiter),
            default_avatar_emoji=settings.default_avatar_emoji,
        )

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    def update_auth(self, auth: AuthContext) -> None:
        """Replace the auth/profile snapshot (sign-in, profile edit, ...)."""
        self.auth = auth

    @property
    def boss_quest_eligible(self) -> bool:
        return is_boss_quest_eligible(self.auth.profile, self.default_avatar_emoji)

    async def refresh_boss_quests(self) -> List[BossQuest]:
        """Ask the generator for boss quests if the profile unlocks them."""
        if self.generator is None or not self.boss_quest_eligible:
            self._boss_quests = []
            return []
        self._boss_quests = list(
            await self.generator.generate(self.auth.profile, self.store.list_quests())
        )
        return list(self._boss_quests)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def select_tab(self, tab: Union[QuestTab, str]) -> QuestTab:
        return self.navigation.select(tab)

    def toggle_quest(self, quest_id: str) -> None:
        self.engine.toggle_completion(quest_id)

    def add_quest(self, form: Union[QuestForm, Dict[str, Any]]) -> Optional[Quest]:
        """Handle an "Add Quest" submission.

        The repeat schedule on the form is accepted but not stored yet;
        only title, category and xp reach the store.
        """
        if not isinstance(form, QuestForm):
            try:
                form = QuestForm.model_validate(form)
            except ValidationError as e:
                logger.warning(f"Rejected quest form: {e.error_count()} invalid field(s)")
                return None
        return self.engine.create_quest(form.title, form.category, form.xp)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> QuestCenterPage:
        """Compute the full page state from the current snapshots."""
        active_tab = self.navigation.active_tab

        if not self.auth.is_authenticated and not self.auth.loading:
            return QuestCenterPage(status=PageStatus.REDIRECT, redirect_to=AUTH_ROUTE, active_tab=active_tab)

        if self.auth.loading or self.store.loading:
            return QuestCenterPage(status=PageStatus.LOADING, active_tab=active_tab)

        quests = self.engine.project()
        user_region = UserQuestsRegion(quests=quests, summary=summarize(quests))

        state = boss_quest_state(self.boss_quest_eligible, self._boss_quests)
        boss_region = BossQuestsRegion(
            state=state,
            boss_quests=list(self._boss_quests) if state == BossQuestState.AVAILABLE else [],
            call_to_action=PROFILE_ROUTE if state == BossQuestState.LOCKED else None,
        )

        return QuestCenterPage(
            status=PageStatus.READY,
            active_tab=active_tab,
            user_quests=user_region,
            boss_quests=boss_region,
        )
