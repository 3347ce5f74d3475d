from datetime import datetime, timezone

import pytest

from services.sanitizer import sanitize_review, parse_leading_int

NOW = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


def test_defaults_for_minimal_review():
    review = sanitize_review({"company": "Acme", "role": "Engineer"}, now=NOW)

    assert review.id == int(NOW.timestamp() * 1000)
    assert review.rating == 3
    assert review.experience == "Neutral"
    assert review.difficulty == "Medium"
    assert review.date == "2025-03-14"
    assert review.questions_asked == []
    assert review.interview_process == ""
    assert review.preparation_tips == ""
    assert review.author == "Unknown"


def test_empty_input():
    review = sanitize_review(None, now=NOW)
    assert review.company == ""
    assert review.role == ""
    assert review.rating == 3


@pytest.mark.parametrize("raw, expected", [
    (4, 4),
    ("4", 4),
    ("4.7", 4),
    (4.9, 4),
    ("2 stars", 2),
    (" 5", 5),
    (17, 5),
    ("-3", 1),
    (0, 3),
    ("abc", 3),
    (None, 3),
    (True, 3),
    ([], 3),
])
def test_rating_is_clamped_integer(raw, expected):
    review = sanitize_review({"rating": raw}, now=NOW)
    assert review.rating == expected
    assert isinstance(review.rating, int)


def test_questions_are_trimmed_and_empty_entries_dropped():
    review = sanitize_review({"questions_asked": ["  LRU cache ", "", "   ", None, 42]}, now=NOW)
    assert review.questions_asked == ["LRU cache", "42"]


def test_questions_non_list_becomes_empty():
    review = sanitize_review({"questions_asked": "Two Sum"}, now=NOW)
    assert review.questions_asked == []


def test_provided_id_is_kept():
    assert sanitize_review({"id": 7}, now=NOW).id == 7
    assert sanitize_review({"id": "12"}, now=NOW).id == 12


def test_invalid_id_replaced_with_timestamp():
    expected = int(NOW.timestamp() * 1000)
    assert sanitize_review({"id": 0}, now=NOW).id == expected
    assert sanitize_review({"id": "abc"}, now=NOW).id == expected
    assert sanitize_review({"id": -4}, now=NOW).id == expected


def test_text_fields_are_stringified():
    review = sanitize_review({"company": 123, "author": "AI Generated", "date": "2024-01-02"}, now=NOW)
    assert review.company == "123"
    assert review.author == "AI Generated"
    assert review.date == "2024-01-02"


def test_sanitizing_twice_is_stable():
    first = sanitize_review({"company": "Acme", "role": "SRE", "rating": "9", "questions_asked": [" a "]}, now=NOW)
    second = sanitize_review(first.model_dump(), now=datetime(2030, 1, 1, tzinfo=timezone.utc))
    assert second == first


def test_parse_leading_int():
    assert parse_leading_int("+3x") == 3
    assert parse_leading_int("x3") is None
    assert parse_leading_int(float("nan")) is None
