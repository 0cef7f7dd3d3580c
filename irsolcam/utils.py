"""String, byte and time helpers shared across the camera server."""

from __future__ import annotations

import time
import uuid as _uuid
from datetime import datetime

__all__ = [
    "uuid",
    "split",
    "strip",
    "strip_string",
    "timestamp_to_string",
    "duration_to_string",
    "string_to_bytes",
    "bytes_to_string",
]

_WHITESPACE = " \t\n\v\f\r"
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

# Units used by duration_to_string: (nanoseconds per unit, suffix, zero-pad width).
_DURATION_UNITS = (
    (3_600_000_000_000, "hours", 0),
    (60_000_000_000, "minutes", 2),
    (1_000_000_000, "s", 2),
    (1_000_000, "ms", 3),
    (1_000, "us", 3),
    (1, "ns", 3),
)


def uuid() -> str:
    """Return a random version-4 UUID in its canonical lower-case text form."""
    return str(_uuid.uuid4())


def split(s: str, delimiter: str) -> list[str]:
    """Split ``s`` on a single-character ``delimiter``, dropping empty tokens."""
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return [token for token in s.split(delimiter) if token]


def strip(s: str, delimiters: str = _WHITESPACE) -> str:
    """Remove every leading and trailing character that occurs in ``delimiters``."""
    return s.strip(delimiters)


def strip_string(s: str, stripped: str) -> str:
    """Remove one occurrence of ``stripped`` from the start and one from the end of ``s``."""
    if not stripped:
        return s
    return s.removeprefix(stripped).removesuffix(stripped)


def timestamp_to_string(tp: int) -> str:
    """Format a ``time.monotonic_ns()`` reading as local wall-clock time.

    The result looks like ``YYYY-MM-DD HH:MM:SS.ffffff``.
    """
    wall_ns = tp - time.monotonic_ns() + time.time_ns()
    seconds, remainder_ns = divmod(wall_ns, 1_000_000_000)
    moment = datetime.fromtimestamp(seconds)
    return f"{moment:%Y-%m-%d %H:%M:%S}.{remainder_ns // 1_000:06d}"


def duration_to_string(duration_ns: int) -> str:
    """Render a duration given in nanoseconds, e.g. ``"3minutes 20s"`` or ``"4us 030ns"``."""
    if duration_ns == 0:
        return "0ns"

    parts = []
    remaining = duration_ns
    for unit_ns, suffix, width in _DURATION_UNITS:
        if remaining >= unit_ns:
            count, remaining = divmod(remaining, unit_ns)
            parts.append(f"{count:0{width}d}{suffix} " if width else f"{count}{suffix} ")
    return strip("".join(parts), " 0")


def string_to_bytes(s: str) -> bytes:
    """Encode ``s`` into the raw bytes sent over the wire."""
    return s.encode(_ENCODING, _ERRORS)


def bytes_to_string(data: bytes | bytearray) -> str:
    """Decode raw bytes into a string; the inverse of :func:`string_to_bytes`."""
    return bytes(data).decode(_ENCODING, _ERRORS)