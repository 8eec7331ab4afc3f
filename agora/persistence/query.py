"""Query helpers shared by the PostgreSQL repositories."""

LIKE_ESCAPE = "\\"


def contains_pattern(search: str) -> str:
    """ILIKE pattern matching ``search`` literally anywhere in a column.

    ``%`` and ``_`` typed by users are escaped so they match themselves.
    Use together with ``escape=LIKE_ESCAPE``.
    """
    escaped = (
        search.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
