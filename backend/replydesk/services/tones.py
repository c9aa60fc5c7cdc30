from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TONE = "professional"


@dataclass(frozen=True)
class ToneOption:
    value: str
    label: str
    description: str


TONE_OPTIONS: tuple[ToneOption, ...] = (
    ToneOption("professional", "Professional", "Formal and business-like"),
    ToneOption("friendly", "Friendly", "Warm and approachable"),
    ToneOption("empathetic", "Empathetic", "Understanding and caring"),
    ToneOption("apologetic", "Apologetic", "Acknowledging and regretful"),
    ToneOption("enthusiastic", "Enthusiastic", "Positive and energetic"),
    ToneOption("reassuring", "Reassuring", "Calming and confident"),
)

TONE_VALUES: frozenset[str] = frozenset(option.value for option in TONE_OPTIONS)

# Openings run straight into the body clause ("..., and I want to ..."), so each
# one ends with a trailing space.
GREETINGS: dict[str, str] = {
    "professional": "Thank you for contacting {company_name}. ",
    "friendly": "Hi there! Thanks so much for reaching out to {company_name}. ",
    "empathetic": "Thank you for taking the time to contact {company_name}. I understand your concern, ",
    "apologetic": "Thank you for contacting {company_name}. I sincerely apologize for any inconvenience, ",
    "enthusiastic": "Hello! We're delighted to hear from you at {company_name}! ",
    "reassuring": "Thank you for contacting {company_name}. I'm here to help resolve this for you, ",
}

COMPLAINT_EMPATHY: dict[str, str] = {
    "empathetic": "I can understand how frustrating this must be for you. ",
    "apologetic": "I'm truly sorry this happened and want to resolve it immediately. ",
    "reassuring": "Please know that we take all concerns seriously and will work diligently to resolve this. ",
}

QUESTION_ENTHUSIASM: dict[str, str] = {
    "friendly": "I'd love to help you out with this! ",
    "enthusiastic": "I'm excited to share more information about our {product_service}! ",
    "professional": "I'll be pleased to provide you with the information you need. ",
}

_SIGNATURE = "Customer Service Team\n{company_name}"

CLOSINGS: dict[str, str] = {
    "professional": (
        "\n\nI look forward to your response and the opportunity to assist you further."
        "\n\nBest regards,\n" + _SIGNATURE
    ),
    "friendly": (
        "\n\nI'm here to help and looking forward to hearing back from you soon!"
        "\n\nWarm regards,\n" + _SIGNATURE
    ),
    "empathetic": (
        "\n\nI'm personally committed to ensuring your experience with {company_name} meets your expectations. "
        "Please don't hesitate to reach out if you need anything else."
        "\n\nWith care,\n" + _SIGNATURE
    ),
    "apologetic": (
        "\n\nOnce again, I apologize for any inconvenience this may have caused. "
        "We truly value your business and are committed to making this right."
        "\n\nSincerely,\n" + _SIGNATURE
    ),
    "enthusiastic": (
        "\n\nWe're so grateful for customers like you! "
        "Can't wait to help make your experience with {product_service} absolutely amazing!"
        "\n\nWith enthusiasm,\n" + _SIGNATURE
    ),
    "reassuring": (
        "\n\nPlease rest assured that we're here to support you every step of the way. "
        "You can count on us to resolve this matter to your satisfaction."
        "\n\nBest regards,\n" + _SIGNATURE
    ),
}


def resolve_tone(tone: str | None) -> str:
    """Map any incoming tone value onto a known table key (exact match only)."""
    if tone in TONE_VALUES:
        return tone
    return DEFAULT_TONE

