"""Splitting strings on a single-character delimiter."""

from __future__ import annotations

from typing import List, Optional


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")


def split(text: Optional[str], delimiter: str) -> List[str]:
    """Split ``text`` on ``delimiter``, dropping empty tokens.

    Leading, trailing and repeated delimiters never produce empty entries.
    An empty or None ``text`` gives an empty list.
    """
    _check_delimiter(delimiter)
    if not text:
        return []
    return [token for token in text.split(delimiter) if token]


def split_last(text: Optional[str], delimiter: str) -> List[str]:
    """Split ``text`` in two at the last inner ``delimiter``.

    One leading delimiter is ignored, and a trailing delimiter is not
    considered a split point. Without a split point the text (minus a
    leading delimiter) is returned as the only element.
    """
    _check_delimiter(delimiter)
    if not text:
        return []
    size = len(text)
    lhs_offset = 1 if text[0] == delimiter else 0
    rhs_offset = 1 if text[-1] == delimiter else 0

    found_last = text.rfind(delimiter, lhs_offset, size - rhs_offset)
    if found_last < 0:
        return [text[lhs_offset:]]

    inner_rhs_offset = 1 if text[found_last - 1] == delimiter else 0
    head = text[lhs_offset:max(lhs_offset, found_last - inner_rhs_offset)]
    tail = text[found_last + 1:size - rhs_offset]
    return [head, tail]