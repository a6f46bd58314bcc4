"""
Tests for tools/quest_engine.py — projection, toggling, creation and XP summary.
"""

import random
from unittest.mock import MagicMock

from models.quests import QuestStatus, RepeatFrequency
from tools.errors import QuestNotFoundError
from tools.quest_engine import (
    QuestProgressionEngine,
    project_for_display,
    repeat_label,
    summarize,
    validate_new_quest,
)
from tools.quest_store import InMemoryQuestStore

from conftest import make_quest


class TestProjectForDisplay:

    def test_empty_input(self):
        assert project_for_display([]) == []

    def test_fields(self):
        vm = project_for_display([make_quest("q1", "Run 5k", "fitness", 20)])[0]
        assert vm.id == "q1"
        assert vm.title == "Run 5k"
        assert vm.category == "fitness"
        assert vm.completed is False
        assert vm.xp == 20

    def test_completed_flag_follows_status(self):
        vm = project_for_display([make_quest(status=QuestStatus.COMPLETED)])[0]
        assert vm.completed is True

    def test_order_is_stable(self):
        quests = [make_quest(f"q{i}", f"Quest {i}", xp_reward=i) for i in range(20)]
        random.seed(7)
        random.shuffle(quests)
        projected = project_for_display(quests)
        assert [vm.id for vm in projected] == [q.id for q in quests]

    def test_repeat_frequency_always_daily(self):
        quest = make_quest(repeat_frequency="custom", custom_days=3)
        vm = project_for_display([quest])[0]
        assert vm.repeat_frequency == RepeatFrequency.DAILY
        assert vm.repeat_label == "Daily"

    def test_accepts_any_iterable(self):
        projected = project_for_display(make_quest(f"q{i}") for i in range(3))
        assert len(projected) == 3


class TestRepeatLabel:

    def test_known_labels(self):
        assert repeat_label("daily") == "Daily"
        assert repeat_label("weekly") == "Weekly"
        assert repeat_label(RepeatFrequency.MONTHLY) == "Monthly"
        assert repeat_label("one-time") == "One-time"

    def test_custom_and_unknown(self):
        assert repeat_label("custom") == "Custom"
        assert repeat_label("fortnightly") == "Custom"


class TestToggleCompletion:

    def test_pending_to_completed(self, seeded_store):
        engine = QuestProgressionEngine(seeded_store)
        engine.toggle_completion("q1")
        assert seeded_store.get_quest("q1").status == QuestStatus.COMPLETED

    def test_toggle_twice_is_involution(self, seeded_store):
        engine = QuestProgressionEngine(seeded_store)
        engine.toggle_completion("q1")
        engine.toggle_completion("q1")
        assert seeded_store.get_quest("q1").status == QuestStatus.PENDING

    def test_xp_reward_never_changes(self, seeded_store):
        engine = QuestProgressionEngine(seeded_store)
        for _ in range(7):
            engine.toggle_completion("q1")
            assert seeded_store.get_quest("q1").xp_reward == 20

    def test_only_target_quest_changes(self, seeded_store):
        engine = QuestProgressionEngine(seeded_store)
        engine.toggle_completion("q3")
        statuses = {q.id: q.status for q in seeded_store.list_quests()}
        assert statuses == {
            "q1": QuestStatus.PENDING,
            "q2": QuestStatus.COMPLETED,
            "q3": QuestStatus.COMPLETED,
        }

    def test_unknown_id_is_noop(self, seeded_store):
        engine = QuestProgressionEngine(seeded_store)
        before = seeded_store.list_quests()
        engine.toggle_completion("nope")
        assert seeded_store.list_quests() == before

    def test_unknown_id_never_reaches_store(self):
        store = MagicMock()
        store.list_quests.return_value = [make_quest("q1")]
        QuestProgressionEngine(store).toggle_completion("other")
        store.toggle_quest_status.assert_not_called()

    def test_store_race_is_swallowed(self):
        store = MagicMock()
        store.list_quests.return_value = [make_quest("q1")]
        store.toggle_quest_status.side_effect = QuestNotFoundError("q1")
        QuestProgressionEngine(store).toggle_completion("q1")
        store.toggle_quest_status.assert_called_once_with("q1")

    def test_scenario_q1_projection(self):
        store = InMemoryQuestStore([make_quest("q1", xp_reward=20)])
        engine = QuestProgressionEngine(store)
        engine.toggle_completion("q1")
        vm = engine.project()[0]
        assert vm.completed is True
        assert vm.xp == 20


class TestCreateQuest:

    def test_valid_quest(self, engine):
        quest = engine.create_quest("Run 5k", "fitness", 10)
        assert quest is not None
        assert quest.status == QuestStatus.PENDING
        assert quest.xp_reward == 10

    def test_empty_title_rejected(self, engine, store):
        assert engine.create_quest("", "fitness", 10) is None
        assert engine.create_quest("   ", "fitness", 10) is None
        assert store.count == 0

    def test_negative_xp_rejected(self, engine, store):
        assert engine.create_quest("Run", "fitness", -5) is None
        assert store.count == 0

    def test_non_integer_xp_rejected(self, engine, store):
        assert engine.create_quest("Run", "fitness", 2.5) is None
        assert engine.create_quest("Run", "fitness", "10") is None
        assert engine.create_quest("Run", "fitness", True) is None
        assert store.count == 0

    def test_non_string_category_rejected(self, engine, store):
        assert engine.create_quest("Run", 7, 5) is None
        assert engine.create_quest("Run", ["fitness"], 5) is None
        assert store.count == 0

    def test_none_category_stored_as_empty(self, engine):
        assert engine.create_quest("Run", None, 5).category == ""

    def test_zero_xp_allowed(self, engine):
        assert engine.create_quest("Drink water", "health", 0).xp_reward == 0

    def test_title_trimmed_before_store(self):
        store = MagicMock()
        QuestProgressionEngine(store).create_quest("  Run  ", "fitness", 3)
        store.add_quest.assert_called_once_with("Run", "fitness", 3)

    def test_rejected_input_never_reaches_store(self):
        store = MagicMock()
        QuestProgressionEngine(store).create_quest("", "fitness", 3)
        store.add_quest.assert_not_called()

    def test_any_category_accepted(self, engine):
        assert engine.create_quest("Paint", "", 1).category == ""
        assert engine.create_quest("Paint", "🎨 art stuff", 1).category == "🎨 art stuff"

    def test_empty_state_then_create_scenario(self, engine):
        assert engine.project() == []
        engine.create_quest("Meditate", "mind", 5)
        projected = engine.project()
        assert len(projected) == 1
        assert projected[0].completed is False
        assert projected[0].xp == 5

    def test_validate_new_quest_reasons(self):
        assert validate_new_quest("Run", 1) is None
        assert "title" in validate_new_quest("", 1)
        assert "negative" in validate_new_quest("Run", -1)
        assert "category" in validate_new_quest("Run", 1, category=3)


class TestSummary:

    def test_empty(self):
        summary = summarize([])
        assert summary.total == 0
        assert summary.earned_xp == 0

    def test_earned_is_read_from_status(self, seeded_store):
        engine = QuestProgressionEngine(seeded_store)
        summary = engine.summary()
        assert summary.total == 3
        assert summary.completed == 1
        assert summary.earned_xp == 15
        assert summary.available_xp == 25

    def test_untoggling_removes_earned_xp(self, seeded_store):
        engine = QuestProgressionEngine(seeded_store)
        engine.toggle_completion("q1")
        assert engine.summary().earned_xp == 35
        engine.toggle_completion("q1")
        assert engine.summary().earned_xp == 15
