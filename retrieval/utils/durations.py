"""
Duration helpers — minute extraction from free-text hints and range clamping.
"""

import re
from typing import Iterable, Optional

# Two or three digits with an optional minute unit ("20", "45 min", "22m"), or a
# single digit only when a unit follows ("5 min"), so counts like "3 dumbbells" are ignored.
_DURATION_PATTERN = re.compile(
    r"(\d{2,3})\s*(?:minutes|minute|mins|min|m)?|(\d)\s*(?:minutes|minute|mins|min|m)\b"
)


def parse_minutes(hint: str) -> Optional[int]:
    """First minute value found in a hint, or None."""
    match = _DURATION_PATTERN.search(hint or "")
    if not match:
        return None
    return int(match.group(1) or match.group(2))


def clamp_minutes(minutes: int, lower: int, upper: int) -> int:
    return max(lower, min(minutes, upper))


def first_minutes(
    hints: Iterable[str],
    lower: int,
    upper: int,
    default: int,
) -> int:
    """Clamped minutes from the first hint that parses; default when none does."""
    for hint in hints:
        minutes = parse_minutes(hint)
        if minutes is not None:
            return clamp_minutes(minutes, lower, upper)
    return default
