"""GEP-2257 durations, as used by HTTPRoute timeouts.

Timeouts stay strings in the data model so documents round-trip exactly.
These helpers convert to and from ``datetime.timedelta`` for consumers.

Grammar: one to four components of ``<1-5 digits><unit>``, where unit is
``h``, ``m``, ``s`` or ``ms``. Examples: ``"0s"``, ``"1h"``, ``"2m30s"``,
``"1h2m3s500ms"``.

Matching uses ``google-re2`` so hostile input is parsed in linear time.
"""

from __future__ import annotations

from datetime import timedelta

import re2

_DURATION = re2.compile(r"(?:[0-9]{1,5}(?:h|ms|m|s)){1,4}")
_COMPONENT = re2.compile(r"([0-9]{1,5})(h|ms|m|s)")

_UNITS = {
    "h": timedelta(hours=1),
    "m": timedelta(minutes=1),
    "s": timedelta(seconds=1),
    "ms": timedelta(milliseconds=1),
}

MAX_COMPONENT = 99999


def parse_duration(text: str) -> timedelta:
    """Parse a GEP-2257 duration string.

    Raises:
        ValueError: If the string does not match the grammar.
    """
    if _DURATION.fullmatch(text) is None:
        msg = f"invalid duration {text!r}: expected 1-4 components of <1-5 digits><h|m|s|ms>"
        raise ValueError(msg)
    total = timedelta()
    for component in _COMPONENT.finditer(text):
        total += int(component.group(1)) * _UNITS[component.group(2)]
    return total


def format_duration(value: timedelta) -> str:
    """Render a timedelta in canonical GEP-2257 form.

    Raises:
        ValueError: If the value is negative, has sub-millisecond precision,
            or needs more than 99999 hours.
    """
    if value < timedelta():
        msg = f"negative duration {value!r} cannot be represented"
        raise ValueError(msg)
    if value % _UNITS["ms"]:
        msg = f"duration {value!r} has sub-millisecond precision"
        raise ValueError(msg)
    if not value:
        return "0s"

    parts: list[str] = []
    remaining = value
    for unit in ("h", "m", "s", "ms"):
        count, remaining = divmod(remaining, _UNITS[unit])
        if count:
            parts.append(f"{count}{unit}")
    if parts[0].endswith("h") and int(parts[0][:-1]) > MAX_COMPONENT:
        msg = f"duration {value!r} exceeds {MAX_COMPONENT} hours"
        raise ValueError(msg)
    return "".join(parts)
