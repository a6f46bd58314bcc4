"""
Boss Quest Generator — AI sensei that proposes boss challenges.

The Quest Center only knows the BossQuestGenerator protocol. The Gemini
implementation below reads the profile and the user's current quests and
returns a small batch of harder challenges. Every response passes through
BossQuestBatch validation: if the model returns anything else, the whole
batch is discarded and the boss tab stays in pending-generation.
"""

import logging
from typing import List, Optional, Protocol, Sequence
from google import genai
from pydantic import ValidationError

from models.profile import UserProfile
from models.quests import Quest
from models.views import BossQuest, BossQuestBatch
from tools.errors import BossQuestGenerationError
from tools.rate_limiter import RateLimiter
from tools.settings import Settings

logger = logging.getLogger('BossQuestGenerator')


BOSS_QUEST_SCHEMA = """
You must respond with ONLY valid JSON matching this exact schema. No markdown, no explanation.

{
  "boss_quests": [
    {
      "title": "Short, epic challenge name",
      "description": "One or two sentences describing what must be done",
      "category": "fitness|study|mind|...",
      "xp_reward": 250
    }
  ]
}

XP SCALE:
  500 = Multi-week transformation (run a half marathon, finish a course)
  250 = Week-long push that stretches a current habit
  100 = A single hard day well beyond the daily quests
"""


class BossQuestGenerator(Protocol):
    """Anything that can produce boss quests for a profile."""

    async def generate(self, profile: UserProfile, quests: Sequence[Quest]) -> List[BossQuest]:
        ...


def build_gemini_client(settings: Settings):
    """Return a genai client, or None when no API key is configured."""
    if not settings.boss_quests_enabled:
        logger.info("GEMINI_API_KEY not set; boss quest generation disabled.")
        return None
    return genai.Client(api_key=settings.gemini_api_key)


def build_boss_quest_generator(settings: Settings, limiter: Optional[RateLimiter] = None):
    """Return a GeminiBossQuestGenerator for the configured model, or None when disabled."""
    client = build_gemini_client(settings)
    if client is None:
        return None
    return GeminiBossQuestGenerator(client, model_id=settings.boss_quest_model, limiter=limiter)


def _strip_fences(raw_text: str) -> str:
    raw_text = raw_text.strip()
    if raw_text.startswith('```'):
        raw_text = raw_text.split('\n', 1)[1] if '\n' in raw_text else ''
        raw_text = raw_text.rsplit('```', 1)[0]
    return raw_text.strip()


def parse_boss_quests(raw_text: str) -> List[BossQuest]:
    """Validate a model response. Raises BossQuestGenerationError on any defect."""
    try:
        batch = BossQuestBatch.model_validate_json(_strip_fences(raw_text))
    except ValidationError as e:
        raise BossQuestGenerationError(f"Boss quest output failed validation: {e}") from e
    return batch.boss_quests


class GeminiBossQuestGenerator:
    """Generates boss quests tailored to the profile and current quest list."""

    def __init__(self, client, model_id: str = "gemini-2.0-flash",
                 limiter: Optional[RateLimiter] = None, max_quests: int = 3):
        self.client = client
        self.model_id = model_id
        self.limiter = limiter or RateLimiter(name=f"boss_quests:{model_id}")
        self.max_quests = max_quests

        self.system_prompt = f"""You are the Sensei of a self-improvement dojo.
Users track daily training quests. Once they have set up a profile you design
"boss quests": rare, demanding challenges that build on what they already practise.

Propose at most {self.max_quests} boss quests. Never repeat an existing quest.

{BOSS_QUEST_SCHEMA}
"""

    def _build_prompt(self, profile: UserProfile, quests: Sequence[Quest]) -> str:
        quest_lines = "\n".join(
            f"- {q.title} ({q.category or 'general'}, +{q.xp_reward} XP, {q.status.value})"
            for q in quests
        ) or "- (no quests yet)"
        return f"""## Profile
Username: {profile.username or 'unknown'}
Class: {profile.character_class or 'unspecified'}
Avatar: {profile.avatar_emoji}

## Current Quests
{quest_lines}

Design the boss quests now. Respond with ONLY the JSON."""

    async def generate(self, profile: UserProfile, quests: Sequence[Quest] = ()) -> List[BossQuest]:
        """Ask Gemini for boss quests.

        Returns:
            Validated boss quests (at most max_quests), or an empty list on
            any failure or when rate limited.
        """
        if self.client is None:
            return []

        if not self.limiter.try_acquire():
            return []
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_id,
                contents=self._build_prompt(profile, quests),
                config=genai.types.GenerateContentConfig(
                    system_instruction=self.system_prompt,
                    temperature=0.7,
                )
            )
            boss_quests = parse_boss_quests(response.text or "")
        except BossQuestGenerationError as e:
            logger.error(f"{e} (nothing kept)")
            return []
        except Exception as e:
            logger.error(f"Boss quest generation error: {e}")
            return []

        logger.info(f"Generated {len(boss_quests)} boss quests for {profile.username or 'user'}")
        return boss_quests[:self.max_quests]
