"""Rule-based message classifier and templated responder.

Precedence for every message:

1. crisis language  -> fixed critical alert, sentiment ``crisis``
2. medical symptoms -> category template (``emergency`` also raises the crisis flag)
3. intent table     -> random reply from the intent's pool (``default`` when nothing matches)

Everything here is pure apart from template selection, which draws from an
injectable ``random.Random``-compatible source.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple

from .loader import load_response_pools
from .patterns import (
    CRISIS_PATTERNS, MEDICAL_PATTERNS, INTENT_PATTERNS,
    INTENT_DEFAULT, INTENT_CRISIS, MED_EMERGENCY,
    POSITIVE_WORDS, NEGATIVE_WORDS,
)
from .templates import (
    CLINICAL_HEADER, ASSESSMENT_HEADER, DEFAULT_HOTLINES, DEFAULT_EMERGENCY_NUMBER,
    crisis_alert, medical_templates, personalize,
)

SENTIMENT_POSITIVE = "positive"
SENTIMENT_NEGATIVE = "negative"
SENTIMENT_NEUTRAL = "neutral"
SENTIMENT_CRISIS = "crisis"


class ChoiceSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


@dataclass
class ClassificationResult:
    intent: str
    sentiment: str
    medical_category: Optional[str]
    is_crisis: bool


@dataclass
class ResponsePayload:
    response: str
    sentiment: str
    crisis_flag: bool


def detect_crisis(message: str) -> bool:
    return any(p.search(message) for p in CRISIS_PATTERNS)

def medical_category(message: str) -> Optional[str]:
    for label, pat in MEDICAL_PATTERNS:
        if pat.search(message):
            return label
    return None

def classify_intent(message: str) -> str:
    for label, pat in INTENT_PATTERNS:
        if pat.search(message):
            return label
    return INTENT_DEFAULT

def analyze_sentiment(message: str) -> str:
    lower = message.lower()
    pos = sum(1 for w in POSITIVE_WORDS if w in lower)
    neg = sum(1 for w in NEGATIVE_WORDS if w in lower)
    if pos > neg:
        return SENTIMENT_POSITIVE
    if neg > pos:
        return SENTIMENT_NEGATIVE
    return SENTIMENT_NEUTRAL

def classify(message: str) -> ClassificationResult:
    if detect_crisis(message):
        return ClassificationResult(INTENT_CRISIS, SENTIMENT_CRISIS, None, True)
    category = medical_category(message)
    return ClassificationResult(
        intent=classify_intent(message),
        sentiment=analyze_sentiment(message),
        medical_category=category,
        is_crisis=category == MED_EMERGENCY,
    )


class Responder:
    def __init__(
        self,
        rng: Optional[ChoiceSource] = None,
        hotlines: Sequence[Tuple[str, str]] = DEFAULT_HOTLINES,
        emergency_number: str = DEFAULT_EMERGENCY_NUMBER,
    ):
        self.rng = rng or random.Random()
        self.hotlines = [tuple(h) for h in hotlines]
        self.emergency_number = emergency_number
        self._medical = medical_templates(emergency_number)

    def respond(self, message: str, context: Optional[Dict[str, Any]] = None) -> ResponsePayload:
        return self.respond_classified(message, context)[0]

    def respond_classified(
        self, message: str, context: Optional[Dict[str, Any]] = None
    ) -> Tuple[ResponsePayload, ClassificationResult]:
        message = message or ""
        name = (context or {}).get("name")
        if not isinstance(name, str):
            name = None
        result = classify(message)

        if result.intent == INTENT_CRISIS:
            text = crisis_alert(self.hotlines, self.emergency_number)
            return ResponsePayload(text, SENTIMENT_CRISIS, True), result

        if result.medical_category:
            text = personalize(self._medical[result.medical_category], ASSESSMENT_HEADER, name)
            return ResponsePayload(text, result.sentiment, result.is_crisis), result

        pools = load_response_pools()
        pool = pools.get(result.intent) or pools[INTENT_DEFAULT]
        text = personalize(self.rng.choice(pool), CLINICAL_HEADER, name)
        return ResponsePayload(text, result.sentiment, False), result


_default = Responder()

def respond(message: str, context: Optional[Dict[str, Any]] = None) -> ResponsePayload:
    return _default.respond(message, context)
