"""String helpers: substring replacement, duplication and bounded formatting."""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Sequence


class FormatResult(NamedTuple):
    """Outcome of a bounded format.

    ``text`` is what fits in the buffer (without the terminator) and
    ``length`` is the full length the formatted string would have had.
    """

    text: str
    length: int


def repl_str(text: str, old: str, new: str) -> str:
    """Return ``text`` with every non-overlapping ``old`` replaced by ``new``.

    Matches are found from left to right; an empty ``old`` is rejected.
    """
    if not isinstance(text, str) or not isinstance(old, str) or not isinstance(new, str):
        raise TypeError("text, old and new must all be strings")
    if not old:
        raise ValueError("substring to replace must not be empty")
    return text.replace(old, new)


def strdup(text: Optional[str]) -> Optional[str]:
    """Return a copy of ``text``, or None when ``text`` is None."""
    if text is None:
        return None
    return strndup(text, len(text))


def strndup(text: Optional[str], length: int) -> Optional[str]:
    """Return the first ``length`` characters of ``text``, or None when ``text`` is None."""
    if text is None:
        return None
    if length < 0:
        raise ValueError("length must not be negative")
    return str(text[:length])


def vsnprintf(buffer_size: int, fmt: Optional[str], args: Sequence[Any]) -> FormatResult:
    """Format ``fmt % args`` into a buffer of ``buffer_size`` characters.

    One character of the buffer is kept for the terminator, so at most
    ``buffer_size - 1`` characters are returned. A buffer size of zero only
    measures the result. The full length is always reported, even when the
    text was truncated.
    """
    if fmt is None:
        raise ValueError("format must not be None")
    if buffer_size < 0:
        raise ValueError("buffer size must not be negative")
    try:
        formatted = fmt % tuple(args)
    except (TypeError, ValueError, KeyError) as exc:
        raise ValueError(f"cannot format string: {exc}") from exc
    if buffer_size == 0:
        return FormatResult("", len(formatted))
    return FormatResult(formatted[: buffer_size - 1], len(formatted))


def snprintf(buffer_size: int, fmt: Optional[str], *args: Any) -> FormatResult:
    """Format ``fmt`` with ``args`` into a buffer; see :func:`vsnprintf`."""
    return vsnprintf(buffer_size, fmt, args)