import re
from typing import List, Tuple

CRISIS_PATTERNS = [
    re.compile(r"\b(kill|suicide|suicidal|end my life|want to die|hurt myself|self.?harm|overdose|not worth living)\b", re.I),
    re.compile(r"\b(no reason to live|better off dead|give up on life|can't go on)\b", re.I),
]

MED_EMERGENCY = "emergency"
MED_CONSULT_DOCTOR = "consult_doctor"
MED_SELF_CARE = "self_care"
MED_GENERAL_SYMPTOM = "general_symptom"

# evaluated top to bottom, first match wins
MEDICAL_PATTERNS: List[Tuple[str, re.Pattern]] = [
    (MED_EMERGENCY, re.compile(
        r"\b(severe pain|unbearable pain|chest pain|heart attack|can't breathe|breathing difficulty|coughing blood"
        r"|stroke|bleeding profusely|seizure|medical emergency|passing out|loss of consciousness|paralysis"
        r"|sudden weakness|choking|severe burn|poisoning|anaphylaxis|unable to speak)\b", re.I)),
    (MED_CONSULT_DOCTOR, re.compile(
        r"\b(fever|persistent cough|rash|back pain|stomach pain|joint pain|illness|dizzy|dizziness|nausea|vomiting"
        r"|diarrhea|chronic pain|migraine|infection|sick|physically hurting|swelling|lump|unexplained weight loss"
        r"|palpitations|high blood pressure|blurred vision|frequent urination|blood in stool|chronic fatigue)\b", re.I)),
    (MED_SELF_CARE, re.compile(
        r"\b(mild headache|headache|sniffles|sneeze|mild cold|sore throat|minor cut|scrape|bruise|muscle soreness"
        r"|runny nose|fatigue|minor pain|itchy|mild allergy|stiffness|cramps|mild heartburn|chills|stuffy nose)\b", re.I)),
    (MED_GENERAL_SYMPTOM, re.compile(
        r"\b(symptoms?|pain|ache|hurt|hurting|swollen|discomfort|feel unwell|feeling sick|body ache|bodyaches)\b", re.I)),
]

INTENT_DEFAULT = "default"
INTENT_CRISIS = "crisis"

# declaration order is the precedence: "I can't sleep, I'm anxious" resolves to anxious
INTENT_PATTERNS: List[Tuple[str, re.Pattern]] = [
    ("greeting", re.compile(r"\b(hello|hi|hey|good morning|good evening|good afternoon|greetings)\b", re.I)),
    ("how_are_you", re.compile(r"\b(how are you|what's up|whats up|how do you do)\b", re.I)),
    ("sad_or_depressed", re.compile(r"\b(sad|depressed|depression|down|low|unhappy|miserable|crying|cried|tears)\b", re.I)),
    ("anxious", re.compile(r"\b(anxious|anxiety|panic|worried|worry|nervous|stress|stressed|overwhelm)\b", re.I)),
    ("hopeless", re.compile(r"\b(hopeless|no hope|pointless|meaningless|futile|give up|giving up|can't do this)\b", re.I)),
    ("sleep", re.compile(r"\b(sleep|insomnia|can't sleep|tired|fatigue|exhausted|no energy|woke up)\b", re.I)),
    ("social", re.compile(r"\b(alone|lonely|isolated|no friends|no one cares|abandoned|rejected|left out)\b", re.I)),
    ("work_school", re.compile(r"\b(work|job|school|college|university|boss|coworker|grades|failing|fired)\b", re.I)),
    ("relationships", re.compile(r"\b(relationship|partner|boyfriend|girlfriend|husband|wife|breakup|divorce|family|parents)\b", re.I)),
    ("therapy", re.compile(r"\b(therapy|therapist|counselor|psychiatrist|medication|medicine|treatment|help|doctor|pill)\b", re.I)),
    ("progress", re.compile(r"\b(better|improving|progress|good day|doing well|feeling good|managed|accomplished|healed)\b", re.I)),
    ("cbt_thoughts", re.compile(r"\b(thoughts|thinking|mind|believe|belief|thought|think|feel like)\b", re.I)),
    ("gratitude", re.compile(r"\b(grateful|gratitude|thankful|appreciate|blessed)\b", re.I)),
    ("breathing", re.compile(r"\b(breathe|breathing|breath|calm down|relax|panic attack)\b", re.I)),
    ("who_are_you", re.compile(r"\b(who are you|what are you|your name|introduce yourself)\b", re.I)),
]

INTENTS = [label for label, _ in INTENT_PATTERNS] + [INTENT_DEFAULT]

POSITIVE_WORDS = [
    "happy", "better", "great", "good", "hopeful", "excited", "grateful", "proud",
    "calm", "peaceful", "motivated", "progress", "healthy", "healing",
]

NEGATIVE_WORDS = [
    "sad", "depressed", "hopeless", "worthless", "tired", "exhausted", "anxious", "worried",
    "alone", "isolated", "failure", "numb", "empty", "dark", "pain", "sick", "hurt",
]
