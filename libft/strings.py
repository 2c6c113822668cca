"""String operations: length, search, comparison, copying and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; integer codes are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator (code 0) gives the length of ``s``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator (code 0) gives the length of ``s``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the codes of the first differing pair, where
    the end of a string counts as code 0, or 0 when they agree.
    """
    _non_negative("n", n)
    for a, b in zip(s1[:n].ljust(n, "\0"), s2[:n].ljust(n, "\0")):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    _non_negative("length", length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the length of ``src``, the length the copy
    would have had without truncation.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed the length of ``dst``, nothing is appended and
    the returned length is ``size`` plus the length of ``src``.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, c: int | str) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty words."""
    delimiter = _char(c)
    if delimiter == "\0":
        return [s] if s else []
    return [word for word in s.split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each character of ``chars`` in order.

    When ``f`` returns a character it replaces the one at that index.
    """
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement