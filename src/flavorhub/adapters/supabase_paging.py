"""Paged reads for PostgREST queries.

PostgREST caps every response at ``db-max-rows`` (1000 on Supabase by
default), so full-table reads walk the result with ``range`` and stop once
the exact row count reported by the server has been collected.
"""

from collections.abc import Callable
from typing import Any

PAGE_SIZE = 1000


def fetch_all_rows(build_query: Callable[[], Any]) -> list[dict[str, Any]]:
    """Collect every row of a query built with ``select(..., count="exact")``.

    ``build_query`` must return a fresh, ordered request builder on each call.
    """
    rows: list[dict[str, Any]] = []
    while True:
        start = len(rows)
        response = build_query().range(start, start + PAGE_SIZE - 1).execute()
        page = response.data or []
        rows.extend(page)
        total = response.count
        if not page:
            return rows
        if total is not None and len(rows) >= total:
            return rows
        if total is None and len(page) < PAGE_SIZE:
            return rows
