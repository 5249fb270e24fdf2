"""
Row search: case-insensitive substring match, any term wins.
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from sheet_insights.core.cells import row_text

logger = logging.getLogger(__name__)


def tokenize_query(query: str) -> List[str]:
    """Lower-cased, whitespace-separated search terms."""
    return [term for term in query.lower().split() if term]


def search(rows: Sequence[Sequence[Any]], query: str) -> Sequence[Sequence[Any]]:
    """
    Filter data rows (header excluded) matching any query term.

    A blank query returns the rows unchanged.
    """
    terms = tokenize_query(query or "")
    if not terms:
        return rows

    matched = []
    for row in rows:
        text = row_text(row).lower()
        if any(term in text for term in terms):
            matched.append(row)

    logger.debug(f"Search {terms}: {len(matched)}/{len(rows)} rows matched")
    return matched
