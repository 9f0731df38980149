"""ISO-8601 duration parsing for video lengths."""

from __future__ import annotations

import math
import re
from typing import Optional

ISO_DURATION = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def parse_duration_minutes(value: Optional[str]) -> int:
    """Converts a ``PT#H#M#S`` duration into whole minutes.

    Leftover seconds round up to the next minute. Unparsable input yields 0.
    """

    if not value:
        return 0
    match = ISO_DURATION.search(value)
    if not match:
        return 0
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return hours * 60 + minutes + math.ceil(seconds / 60)
