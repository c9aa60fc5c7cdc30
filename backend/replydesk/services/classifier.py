from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

MessageKind = Literal["complaint", "question", "comment"]

COMPLAINT_KEYWORDS: tuple[str, ...] = (
    "problem",
    "issue",
    "wrong",
    "bad",
    "terrible",
    "awful",
    "disappointed",
    "frustrated",
    "angry",
    "upset",
    "broken",
    "doesn't work",
    "not working",
)

QUESTION_KEYWORDS: tuple[str, ...] = (
    "?",
    "how",
    "what",
    "when",
    "where",
    "why",
    "can you",
    "could you",
    "would you",
    "help me understand",
)

# Plain substring alternation: "show" matches "how", "badge" matches "bad".
_COMPLAINT_RE = re.compile("|".join(re.escape(k) for k in COMPLAINT_KEYWORDS), re.IGNORECASE)
_QUESTION_RE = re.compile("|".join(re.escape(k) for k in QUESTION_KEYWORDS), re.IGNORECASE)


def is_complaint(text: str) -> bool:
    return _COMPLAINT_RE.search(text or "") is not None


def is_question(text: str) -> bool:
    return _QUESTION_RE.search(text or "") is not None


@dataclass(frozen=True)
class Classification:
    complaint: bool
    question: bool

    @property
    def kind(self) -> MessageKind:
        if self.complaint:
            return "complaint"
        if self.question:
            return "question"
        return "comment"


def classify(text: str) -> Classification:
    """Run both keyword tests independently; ``kind`` resolves complaint over question."""
    return Classification(complaint=is_complaint(text), question=is_question(text))
