from __future__ import annotations

from dataclasses import dataclass

from replydesk.services.classifier import MessageKind, classify
from replydesk.services.tones import (
    CLOSINGS,
    COMPLAINT_EMPATHY,
    DEFAULT_TONE,
    GREETINGS,
    QUESTION_ENTHUSIASM,
    resolve_tone,
)

MISSING_FIELDS_MESSAGE = "Please fill in all required fields to generate a response."


@dataclass(frozen=True)
class ComposeInput:
    company_name: str
    product_service: str
    customer_message: str
    tone: str = DEFAULT_TONE

    def is_complete(self) -> bool:
        return bool(self.company_name and self.customer_message and self.product_service)


@dataclass(frozen=True)
class ComposedReply:
    text: str
    tone: str
    kind: MessageKind | None


class ResponseComposer:
    """Builds a canned customer-service reply from keyword checks and tone tables.

    ``compose`` is a pure function of its input: no I/O, no hidden state.
    """

    def compose(self, data: ComposeInput) -> str:
        return self.compose_reply(data).text

    def compose_reply(self, data: ComposeInput) -> ComposedReply:
        """Like ``compose`` but also reports the resolved tone and message kind.

        ``kind`` is None when the missing-fields message was returned.
        """
        tone = resolve_tone(data.tone)
        if not data.is_complete():
            return ComposedReply(text=MISSING_FIELDS_MESSAGE, tone=tone, kind=None)

        fields = {"company_name": data.company_name, "product_service": data.product_service}
        kind = classify(data.customer_message).kind

        parts = [GREETINGS[tone].format(**fields)]
        parts.extend(self._body(kind, tone, fields))
        parts.append(CLOSINGS[tone].format(**fields))
        return ComposedReply(text="".join(parts), tone=tone, kind=kind)

    @staticmethod
    def _body(kind: MessageKind, tone: str, fields: dict[str, str]) -> list[str]:
        product = fields["product_service"]
        if kind == "complaint":
            return [
                f"and I want to acknowledge the issue you've experienced with {product}.\n\n",
                "Your feedback is invaluable to us, and I'm committed to making this right. ",
                COMPLAINT_EMPATHY.get(tone, ""),
                "I'd like to help you resolve this matter promptly. "
                "Could you please provide any additional details about the specific issue you encountered? "
                "This will help me ensure we address your concern thoroughly.\n\n",
                "In the meantime, I'm escalating your case to our specialized team "
                "to ensure you receive the best possible solution.",
            ]
        if kind == "question":
            return [
                f"and I'm happy to help answer your question about {product}.\n\n",
                QUESTION_ENTHUSIASM.get(tone, "").format(**fields),
                "Based on your inquiry, I want to make sure I give you "
                "the most accurate and helpful information possible.\n\n",
                "Could you please provide a bit more detail about your specific question? "
                "This will allow me to give you a comprehensive and tailored response "
                "that addresses exactly what you're looking for.",
            ]
        return [
            f"and I appreciate you taking the time to share your thoughts about {product}.\n\n",
            "Your message is important to us, and I want to ensure I provide you "
            "with the most helpful response possible. ",
            "Could you please let me know how I can best assist you today?",
        ]


_composer = ResponseComposer()


def compose(
    company_name: str | None,
    product_service: str | None,
    customer_message: str | None,
    tone: str | None = DEFAULT_TONE,
) -> str:
    return _composer.compose(
        ComposeInput(
            company_name=company_name or "",
            product_service=product_service or "",
            customer_message=customer_message or "",
            tone=tone or DEFAULT_TONE,
        )
    )
