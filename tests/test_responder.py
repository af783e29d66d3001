import random

import pytest

from kindred.engine.loader import load_response_pools
from kindred.engine.patterns import INTENTS
from kindred.engine.responder import (
    Responder, analyze_sentiment, classify, classify_intent, detect_crisis, medical_category, respond,
)
from kindred.engine.templates import format_response


class FirstChoice:
    def choice(self, seq):
        return seq[0]


@pytest.mark.parametrize("text", [
    "I want to kill myself",
    "I've been thinking about suicide",
    "There is no reason to live anymore",
    "I can't go on like this",
    "sometimes I think about self-harm",
    "Everyone would be better off dead without me, I'm so happy to say it",
])
def test_crisis_overrides_everything(text):
    payload = respond(text, {"name": "Asha Rao"})
    assert payload.crisis_flag is True
    assert payload.sentiment == "crisis"
    assert "CRITICAL MEDICAL ALERT" in payload.response
    assert "Patient:" not in payload.response

def test_crisis_beats_medical_emergency():
    result = classify("I have chest pain and I want to die")
    assert result.is_crisis
    assert result.intent == "crisis"
    assert result.medical_category is None

def test_word_boundaries_avoid_partial_matches():
    assert not detect_crisis("I want to improve my skill at painting")
    assert not detect_crisis("I overkilled the revision")
    assert detect_crisis("KILL")

def test_crisis_template_uses_configured_contacts():
    r = Responder(hotlines=[("Samaritans", "116 123")], emergency_number="999")
    text = r.respond("I feel suicidal").response
    assert "**116 123** (Samaritans)" in text
    assert "**999**" in text
    assert "AASRA" not in text

def test_emergency_example():
    payload = respond("I have chest pain and can't breathe")
    assert medical_category("I have chest pain and can't breathe") == "emergency"
    assert payload.crisis_flag is True
    assert "emergency services" in payload.response.lower()

def test_medical_priority_order():
    assert medical_category("chest pain and a mild headache") == "emergency"
    assert medical_category("a fever and a headache") == "consult_doctor"
    assert medical_category("just a headache") == "self_care"
    assert medical_category("my knee has some pain") == "general_symptom"
    assert medical_category("hello there") is None

def test_non_emergency_medical_has_no_crisis_flag():
    payload = respond("I have a sore throat")
    assert payload.crisis_flag is False
    assert "Self-Care" in payload.response

def test_medical_branch_preempts_intent():
    # "pain" routes an emotional message into the symptom template
    result = classify("I'm sad and the pain won't stop")
    assert result.medical_category == "general_symptom"
    assert "General Symptom" in respond("I'm sad and the pain won't stop").response

def test_medical_personalization_uses_first_name():
    text = respond("I have a fever", {"name": "Asha  Rao"}).response
    assert "🩺 **Assessment:**\nPatient: Asha\n" in text

def test_missing_or_blank_name_is_not_personalized():
    assert "Patient:" not in respond("I have a fever", {"name": "   "}).response
    assert "Patient:" not in respond("I have a fever", {}).response
    assert "Patient:" not in respond("I have a fever", None).response

def test_gratitude_example():
    payload = respond("I feel happy and grateful today")
    assert payload.sentiment == "positive"
    assert payload.crisis_flag is False
    assert classify_intent("I feel happy and grateful today") == "gratitude"

def test_intent_table_order_is_precedence():
    # anxious is declared before sleep
    assert classify_intent("I'm anxious and I can't sleep") == "anxious"
    assert classify_intent("hello, I feel sad") == "greeting"
    assert classify_intent("who are you") == "who_are_you"
    assert classify_intent("qwerty") == "default"

def test_empty_message_falls_to_default():
    r = Responder(rng=FirstChoice())
    payload = r.respond("")
    assert payload.response == load_response_pools()["default"][0]
    assert payload.sentiment == "neutral"
    assert payload.crisis_flag is False

def test_injected_rng_makes_selection_deterministic():
    a = Responder(rng=random.Random(7)).respond("hi there")
    b = Responder(rng=random.Random(7)).respond("hi there")
    assert a.response == b.response
    assert a.response in load_response_pools()["greeting"]

def test_structured_intent_reply_is_personalized():
    r = Responder(rng=FirstChoice())
    text = r.respond("I feel so lonely", {"name": "Asha"}).response
    assert text.startswith("🩺 **Clinical Assessment**\nPatient: Asha\n")
    assert "📋 **Recommended Next Steps**\n• " in text

def test_every_intent_has_a_pool():
    pools = load_response_pools()
    for intent in INTENTS:
        assert 1 <= len(pools[intent]) <= 3

def test_format_response_layout():
    text = format_response("A.", ["one", "two"], "Q?")
    assert text == (
        "🩺 **Clinical Assessment**\nA.\n\n"
        "📋 **Recommended Next Steps**\n• one\n• two\n\n"
        "💬 **Follow-up**\nQ?"
    )

@pytest.mark.parametrize("text,expected", [
    ("I'm happy and hopeful", "positive"),
    ("so tired and alone", "negative"),
    ("I feel good but sad", "neutral"),
    ("nothing to report", "neutral"),
    ("", "neutral"),
])
def test_sentiment(text, expected):
    assert analyze_sentiment(text) == expected

def test_sentiment_is_substring_based():
    # "sadness" contains "sad"
    assert analyze_sentiment("Sadness") == "negative"
