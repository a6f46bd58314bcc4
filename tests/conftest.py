"""
Shared pytest fixtures for the Quest Center test suite.
"""

import pytest
from unittest.mock import MagicMock

from models.profile import AuthContext, UserProfile
from models.quests import Quest, QuestStatus
from tools.quest_engine import QuestProgressionEngine
from tools.quest_store import InMemoryQuestStore


# ---------------------------------------------------------------------------
# Gemini Mock Helpers (reusable classes)
# ---------------------------------------------------------------------------

class MockGeminiResponse:
    """Simulates a Gemini response with .text property."""

    def __init__(self, text: str):
        self.text = text


class MockGeminiClient:
    """Mock Gemini client that returns canned text responses.

    Usage:
        client = MockGeminiClient(['{"boss_quests": []}'])
        resp = await client.aio.models.generate_content(model=..., contents=...)
    """

    def __init__(self, responses=None):
        self._responses = responses or []
        self.calls = []

    @property
    def aio(self):
        return self

    @property
    def models(self):
        return self

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if len(self.calls) <= len(self._responses):
            resp = self._responses[len(self.calls) - 1]
        else:
            resp = '{"error": "no more canned responses"}'
        if isinstance(resp, Exception):
            raise resp
        if isinstance(resp, str):
            return MockGeminiResponse(resp)
        return resp


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def make_quest(quest_id="q1", title="Run 5k", category="fitness", xp_reward=20,
               status=QuestStatus.PENDING, **extra) -> Quest:
    return Quest(id=quest_id, title=title, category=category, xp_reward=xp_reward, status=status, **extra)


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryQuestStore()


@pytest.fixture
def seeded_store():
    """Store holding three quests, one of them completed."""
    return InMemoryQuestStore([
        make_quest("q1", "Run 5k", "fitness", 20),
        make_quest("q2", "Read 30 pages", "study", 15, QuestStatus.COMPLETED),
        make_quest("q3", "Meditate", "mind", 5),
    ])


@pytest.fixture
def engine(store):
    return QuestProgressionEngine(store)


@pytest.fixture
def fresh_profile():
    """A profile nobody has touched yet."""
    return UserProfile()


@pytest.fixture
def filled_profile():
    return UserProfile(username="kaizen_kid", character_class="Monk", avatar_emoji="🥋")


@pytest.fixture
def signed_in(filled_profile):
    return AuthContext(user_id="user-1", profile=filled_profile)


@pytest.fixture
def mock_limiter():
    """Rate limiter that always has a token."""
    limiter = MagicMock()
    limiter.try_acquire.return_value = True
    return limiter
