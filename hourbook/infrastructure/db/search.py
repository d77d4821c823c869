"""
Wildcard search helpers.
Turns a user-typed search term into a safe SQL LIKE pattern.
"""

from typing import Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Query


LIKE_ESCAPE = "\\"


def build_like_pattern(term: Optional[str]) -> Optional[str]:
    """
    Build a substring LIKE pattern from a search term.

    Literal ``%``, ``_`` and the escape character are escaped first, then ``*``
    becomes the multi-character wildcard. Returns None for blank terms.
    """
    if term is None or not term.strip():
        return None

    escaped = (
        term.strip()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
        .replace("*", "%")
    )
    return f"%{escaped}%"


def apply_search(query: Query, columns: Sequence, term: Optional[str]) -> Query:
    """OR a case-insensitive LIKE over the given columns. Blank terms leave the query untouched."""
    pattern = build_like_pattern(term)
    if pattern is None:
        return query

    return query.filter(
        or_(*[column.ilike(pattern, escape=LIKE_ESCAPE) for column in columns])
    )
