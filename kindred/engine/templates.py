from typing import Dict, List, Sequence, Tuple

from .patterns import MED_EMERGENCY, MED_CONSULT_DOCTOR, MED_SELF_CARE, MED_GENERAL_SYMPTOM

CLINICAL_HEADER = "🩺 **Clinical Assessment**\n"
ASSESSMENT_HEADER = "🩺 **Assessment:**\n"

DEFAULT_HOTLINES: Tuple[Tuple[str, str], ...] = (
    ("Vandrevala Foundation", "9999 666 555"),
    ("AASRA", "9820 466 726"),
)
DEFAULT_EMERGENCY_NUMBER = "112"

def format_response(assessment: str, next_steps: List[str], follow_up: str) -> str:
    steps = "\n".join(f"• {s}" for s in next_steps)
    return (
        f"{CLINICAL_HEADER}{assessment}\n\n"
        f"📋 **Recommended Next Steps**\n{steps}\n\n"
        f"💬 **Follow-up**\n{follow_up}"
    )

def crisis_alert(hotlines: Sequence[Tuple[str, str]], emergency_number: str) -> str:
    lines = []
    if hotlines:
        calls = " or ".join(f"**{phone}** ({name})" for name, phone in hotlines)
        lines.append(f"• 📞 Call {calls}.")
    lines.append(f"• 🏥 Call **{emergency_number}** for Emergency Services immediately.")
    lines.append("• Proceed to the nearest hospital emergency room.")
    return (
        "🚨 **CRITICAL MEDICAL ALERT**\n\n"
        f"{ASSESSMENT_HEADER}"
        "High-risk indicators detected. You require immediate professional intervention.\n\n"
        "📋 **Mandatory Next Steps:**\n"
        + "\n".join(lines)
        + "\n\n💬 **Follow-up:**\n"
        "Please confirm that you are currently safe and are contacting emergency services."
    )

def medical_templates(emergency_number: str) -> Dict[str, str]:
    return {
        MED_EMERGENCY: (
            "🚨 **Medical Category: Emergency**\n\n"
            f"{ASSESSMENT_HEADER}"
            "Severe physical distress or a potential critical medical event detected.\n\n"
            "📋 **Immediate Next Steps:**\n"
            "• 🏥 **Seek immediate medical attention.**\n"
            "• Go to the nearest hospital emergency room immediately.\n"
            f"• Call **{emergency_number}** for emergency services.\n"
            "• Do not drive yourself if you are experiencing severe pain, chest tightness, or altered consciousness.\n\n"
            "💬 **Follow-up:**\n"
            "Are emergency responders on their way, or is someone taking you to the hospital right now?"
        ),
        MED_CONSULT_DOCTOR: (
            "⚕️ **Medical Category: Consult Doctor**\n\n"
            f"{ASSESSMENT_HEADER}"
            "Moderate physical illness or persistent symptoms detected that need professional evaluation.\n\n"
            "📋 **Recommended Next Steps:**\n"
            "• Book an appointment with your primary care physician or visit an urgent care clinic.\n"
            "• Keep a detailed log of your symptoms, including severity and duration.\n"
            "• Monitor your temperature and stay hydrated.\n"
            "• Treat it as an emergency if symptoms suddenly become severe or unbearable.\n\n"
            "💬 **Follow-up:**\n"
            "How long have these symptoms been going on, and are they getting worse?"
        ),
        MED_SELF_CARE: (
            "🩹 **Medical Category: Self-Care**\n\n"
            f"{ASSESSMENT_HEADER}"
            "Mild discomfort or minor physical symptoms detected, typically manageable at home.\n\n"
            "📋 **Recommended Next Steps:**\n"
            "• Prioritize rest and make sure you stay hydrated.\n"
            "• Use over-the-counter remedies according to package instructions, if appropriate.\n"
            "• Watch for any signs of worsening.\n"
            "• See a doctor if symptoms persist beyond a few days.\n\n"
            "💬 **Follow-up:**\n"
            "Are you able to rest comfortably right now?"
        ),
        MED_GENERAL_SYMPTOM: (
            "🩺 **Medical Category: General Symptom Assessment**\n\n"
            f"{ASSESSMENT_HEADER}"
            "You have reported symptoms or discomfort, but more specific information is needed.\n\n"
            "📋 **Recommended Next Steps:**\n"
            "• Take a moment to note exactly which part of your body is affected.\n"
            "• Note whether the pain or discomfort is sharp, dull, throbbing, or constant.\n"
            "• Check whether you have a fever or any rapidly changing symptoms.\n\n"
            "💬 **Follow-up:**\n"
            "Please describe your symptoms in more detail (e.g., location, severity from 1-10, type of pain)."
        ),
    }

def personalize(text: str, header: str, name: str | None) -> str:
    """Insert ``Patient: <first name>`` right after ``header`` (first occurrence only)."""
    if not name:
        return text
    parts = name.split()
    if not parts:
        return text
    return text.replace(header, f"{header}Patient: {parts[0]}\n", 1)
