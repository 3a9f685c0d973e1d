"""Parsing of display strings found in renderer text runs."""


def parse_duration(text: str | None) -> int | None:
    """Parse "m:ss" or "h:mm:ss" into seconds.

    Returns:
        Duration in seconds, or None if the text is not a duration.
    """
    if not text:
        return None
    parts = text.strip().split(":")
    if not 2 <= len(parts) <= 3:
        return None
    try:
        values = [int(p) for p in parts]
    except ValueError:
        return None
    seconds = 0
    for value in values:
        seconds = seconds * 60 + value
    return seconds


def parse_int(text: str | None) -> int | None:
    """Parse a plain integer such as a release year ("2019")."""
    if not text:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None

