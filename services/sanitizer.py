import re
from datetime import datetime, timezone
from typing import Optional

from models.review import Review

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

TEXT_DEFAULTS = {
    "company": "",
    "role": "",
    "experience": "Neutral",
    "difficulty": "Medium",
    "interview_process": "",
    "preparation_tips": "",
    "author": "Unknown",
}


def sanitize_review(raw: dict, now: Optional[datetime] = None) -> Review:
    """
    Coerce a partial review (seed row, user submission or AI reply) into a
    complete Review. Every review returned to a client goes through here.

    - id: kept when it is a positive integer, otherwise the current epoch ms
    - rating: leading integer of the value, 3 when missing/non-numeric/zero,
      clamped to [1, 5]
    - questions_asked: list of trimmed, non-empty strings
    - text fields: stringified, defaults applied when missing or empty
    """
    raw = raw or {}
    now = now or datetime.now(timezone.utc)

    fields = {name: _text(raw.get(name), default) for name, default in TEXT_DEFAULTS.items()}

    return Review(
        id=_review_id(raw.get("id"), now),
        rating=_rating(raw.get("rating")),
        date=_text(raw.get("date"), now.date().isoformat()),
        questions_asked=_questions(raw.get("questions_asked")),
        **fields,
    )


def parse_leading_int(value) -> Optional[int]:
    """Integer prefix of a number or string ("4.7" -> 4, "4 stars" -> 4), None if there is none"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def _rating(value) -> int:
    rating = parse_leading_int(value) or 3
    return min(5, max(1, rating))


def _review_id(value, now: datetime) -> int:
    review_id = None
    if isinstance(value, int) and not isinstance(value, bool):
        review_id = value
    elif isinstance(value, str) and value.strip().isdigit():
        review_id = int(value.strip())
    if not review_id or review_id < 0:
        return int(now.timestamp() * 1000)
    return review_id


def _questions(value) -> list:
    if not isinstance(value, list):
        return []
    questions = []
    for item in value:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            questions.append(text)
    return questions


def _text(value, default: str) -> str:
    if value is None or value == "":
        return default
    return str(value)
