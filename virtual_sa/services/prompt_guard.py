"""
Off-topic prompt guard for the Discovery Accelerator.

A cheap allow/deny heuristic run before spending an LLM call. It is meant to
stop obviously social or off-domain input, not to classify intent; some
off-topic prompts will get through.
"""
import re
from dataclasses import dataclass
from typing import Optional

import structlog
from prometheus_client import Counter

logger = structlog.get_logger()

PROMPT_REJECTIONS = Counter(
    'prompt_guard_rejections_total', 'Prompts rejected before reaching the LLM', ['reason']
)

MIN_PROMPT_LENGTH = 15

SOCIAL_PATTERNS = [
    re.compile(p) for p in (
        r"^(hi|hello|hey|hiya|howdy|yo|sup|greetings)( there)?[\s!.,?]*$",
        r"^(hi|hello|hey)[\s,]+(how are you|how's it going|what's up)[\s!.?]*$",
        r"^(good )?(morning|afternoon|evening|night)[\s!.]*$",
        r"^(thanks|thank you|thx|ty|cheers)( (so|very) much)?[\s!.]*$",
        r"^(ok|okay|k|cool|nice|great|awesome|lol|haha|hmm|yes|no|sure)[\s!.]*$",
        r"^how (are|r) (you|u)( doing)?( today)?[\s!.?]*$",
        r"^what'?s up[\s!.?]*$",
        r"^(who|what) are you[\s!.?]*$",
        r"^(tell me|say) (a )?(joke|story|something funny)[\s!.?]*$",
        r"^(bye|goodbye|see you|see ya|good night)( later)?[\s!.]*$",
        r"^(test|testing)( \d+)*[\s!.]*$",
        r"^how('s| is) (your|the) (day|weekend)( going)?[\s!.?]*$",
    )
]

OFF_TOPIC_WORDS = [
    # food
    "recipe", "recipes", "cooking", "bake", "baking", "pizza", "burger", "dessert", "cuisine",
    # entertainment
    "movie", "movies", "netflix", "celebrity", "celebrities", "gossip", "tv show", "anime",
    "song lyrics", "horoscope", "astrology", "zodiac",
    # sports
    "football", "soccer", "basketball", "baseball", "cricket", "nba", "nfl", "fifa",
    "world cup", "super bowl",
    # politics
    "politics", "election", "elections", "democrat", "republican", "senator", "parliament",
    # relationships
    "dating", "girlfriend", "boyfriend", "breakup", "romance", "crush", "wedding",
    # misc
    "lottery", "casino",
]

_OFF_TOPIC_RE = re.compile(
    r"\b(" + "|".join(re.escape(w) for w in OFF_TOPIC_WORDS) + r")\b"
)

REJECTION_MESSAGES = {
    "too_short": (
        "Please describe your AI use case in a bit more detail, e.g. what data it uses "
        "and who it serves."
    ),
    "social": (
        "Hi there! Describe an AI or business use case (for example, 'Build a RAG chatbot "
        "over our HR policies') and I'll draft an architecture."
    ),
    "off_topic": (
        "That doesn't look like a technology or business use case. Try describing an AI "
        "system you want to build for your organization."
    ),
}


@dataclass(frozen=True)
class GuardResult:
    accepted: bool
    reason: Optional[str] = None
    message: Optional[str] = None
    matched: Optional[str] = None


def check_prompt(prompt: str) -> GuardResult:
    """Accept or reject a free-text prompt without any network call"""
    text = (prompt or "").strip().lower()

    if len(text) < MIN_PROMPT_LENGTH:
        return _reject("too_short")

    for pattern in SOCIAL_PATTERNS:
        if pattern.match(text):
            return _reject("social", matched=pattern.pattern)

    match = _OFF_TOPIC_RE.search(text)
    if match:
        return _reject("off_topic", matched=match.group(1))

    return GuardResult(accepted=True)


def _reject(reason: str, matched: Optional[str] = None) -> GuardResult:
    PROMPT_REJECTIONS.labels(reason=reason).inc()
    logger.info("Prompt rejected by guard", reason=reason, matched=matched)
    return GuardResult(
        accepted=False,
        reason=reason,
        message=REJECTION_MESSAGES[reason],
        matched=matched,
    )
