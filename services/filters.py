"""
Case-insensitive query filters over the sample data.

Company and role match by substring, category and difficulty by equality.
A predicate that is None or empty matches everything; the rest are ANDed.
Input order is preserved and nothing here raises.
"""
from typing import Iterable, List, Optional


def _contains(value: Optional[str], query: Optional[str]) -> bool:
    if not query:
        return True
    return bool(value) and query.lower() in str(value).lower()


def _equals(value: Optional[str], query: Optional[str]) -> bool:
    if not query:
        return True
    return bool(value) and str(value).lower() == query.lower()


def _field(item, name):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def filter_reviews(reviews: Iterable, company: Optional[str] = None, role: Optional[str] = None) -> List:
    return [
        r for r in reviews
        if _contains(_field(r, "company"), company) and _contains(_field(r, "role"), role)
    ]


def filter_problems(problems: Iterable, category: Optional[str] = None, difficulty: Optional[str] = None) -> List:
    return [
        p for p in problems
        if _equals(_field(p, "category"), category) and _equals(_field(p, "difficulty"), difficulty)
    ]


def filter_mcqs(
    mcqs: Iterable,
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
    company: Optional[str] = None,
    role: Optional[str] = None,
) -> List:
    return [
        q for q in mcqs
        if _equals(_field(q, "category"), category)
        and _equals(_field(q, "difficulty"), difficulty)
        and _contains(_field(q, "company"), company)
        and _contains(_field(q, "role"), role)
    ]
