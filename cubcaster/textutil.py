"""String helpers used by the scene-file parser."""

from __future__ import annotations

from collections.abc import Iterable

_ATOI_SPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_INT_MOD = 2**32
_INT_MAX = 2**31 - 1


def _to_c_int(value: int) -> int:
    """Wrap a value to a signed 32-bit integer."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def parse_int(text: str | None) -> int:
    """Parse a leading decimal integer the way the scene loader expects.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. ``None`` and magnitudes that overflow a 64-bit
    accumulator give ``-1``. The result is wrapped to a 32-bit signed value.
    """
    if text is None:
        return -1
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        if result > _LONG_MAX:
            return -1
        pos += 1
    return _to_c_int(result * sign)


def count_words(text: str, separators: str) -> int:
    """Count the runs of characters not in ``separators``."""
    return len(split_words(text, separators))


def split_words(text: str, separators: str) -> list[str]:
    """Split ``text`` on any character of ``separators``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def trim(text: str, chars: str | None) -> str:
    """Remove characters in ``chars`` from both ends; ``None`` trims nothing."""
    if chars is None or not chars:
        return text
    return text.strip(chars)


def trim_all(items: Iterable[str], chars: str | None) -> list[str]:
    """Trim every string of ``items`` with :func:`trim`."""
    return [trim(item, chars) for item in items]


def split_in_two(text: str, separators: str) -> list[str]:
    """Split ``text`` into a key and the rest of the line.

    The first element is everything before the first separator. When the
    text holds at least two words, the second element is the remainder
    after the run of separators that follows the key, kept verbatim.
    Raises ``ValueError`` when the text holds no word at all.
    """
    words = count_words(text, separators)
    if words == 0:
        raise ValueError("nothing to split")
    end = next(
        (pos for pos, char in enumerate(text) if char in separators), len(text)
    )
    first = text[:end]
    if words < 2:
        return [first]
    start = end
    while start < len(text) and text[start] in separators:
        start += 1
    return [first, text[start:]]