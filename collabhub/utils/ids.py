"""Lenient parsing of identifiers and paging parameters taken from URLs."""

from uuid import UUID


def parse_uuid(value: str | None) -> UUID | None:
    """Return the UUID in ``value``, or None when it is not one."""
    if not value:
        return None
    try:
        return UUID(value)
    except (ValueError, AttributeError):
        return None


def parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except (ValueError, AttributeError):
        return None


def page_window(page: str | None, limit: str | None) -> tuple[int, int] | None:
    """Translate 1-indexed ``page`` and ``limit`` into ``(offset, limit)``.

    Returns None (no paging) unless ``limit`` is a positive integer. A
    missing, invalid or non-positive ``page`` means the first page.
    """
    size = parse_int(limit)
    if size is None or size <= 0:
        return None
    number = parse_int(page)
    if number is None or number < 1:
        number = 1
    return (number - 1) * size, size
