from __future__ import annotations

import pytest

from replydesk.services.classifier import COMPLAINT_KEYWORDS, QUESTION_KEYWORDS, classify, is_complaint, is_question


@pytest.mark.parametrize("keyword", COMPLAINT_KEYWORDS)
def test_each_complaint_keyword_matches_case_insensitively(keyword: str) -> None:
    assert is_complaint(f"Honestly, {keyword.upper()} again.")


@pytest.mark.parametrize("keyword", QUESTION_KEYWORDS)
def test_each_question_keyword_matches_case_insensitively(keyword: str) -> None:
    assert is_question(f"Hi team, {keyword.upper()} please")


def test_matching_is_substring_not_word() -> None:
    assert is_question("Please show me the invoice")
    assert is_complaint("My badge arrived")


def test_plain_comment_matches_neither() -> None:
    result = classify("Just wanted to say thanks")
    assert result.complaint is False
    assert result.question is False
    assert result.kind == "comment"


def test_both_tests_run_independently_and_complaint_wins() -> None:
    result = classify("Why is my order wrong?")
    assert result.complaint is True
    assert result.question is True
    assert result.kind == "complaint"


def test_question_only() -> None:
    assert classify("Where can I download it").kind == "question"


def test_empty_text_is_comment() -> None:
    assert classify("").kind == "comment"
