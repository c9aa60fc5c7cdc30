from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResponseTip:
    title: str
    body: str


RESPONSE_TIPS: tuple[ResponseTip, ...] = (
    ResponseTip("Be Timely", "Respond to customer inquiries within 24 hours, or sooner when possible."),
    ResponseTip("Personalize", "Use the customer's name and reference specific details from their message."),
    ResponseTip("Follow Up", "Always close with clear next steps or an invitation for further communication."),
)
