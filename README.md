# libft

A small library of C-style helpers: character classes, number
conversion, byte-buffer operations, string utilities and a singly linked
list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `libft.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower`. Each accepts a one-character
  string or an integer code; the case converters return the same kind of
  value they were given.
- `libft.convert`: `atoi(text)` skips leading ASCII whitespace, reads one
  optional sign and then digits up to the first non-digit (0 when there
  are none); `itoa(n)` returns the decimal text of an integer.
- `libft.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc`, working on `bytearray`, `bytes` and
  `memoryview` objects. `memmove(buffer, dest, src, n)` copies within one
  buffer between offsets and handles overlap; `memchr` returns an offset
  or `None`; `calloc` returns a zeroed `bytearray`. Lengths that are
  negative or run past a buffer raise `ValueError`.
- `libft.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`,
  `strmapi` and `striteri`. Searches return an index or `None`;
  `strlcpy(src, size)` and `strlcat(dst, src, size)` return the resulting
  text together with the length they tried to create; `striteri` works on
  a mutable sequence of characters and replaces each one for which the
  callback returns a character.
- `libft.linkedlist`: `Node` and `LinkedList`, with `push_front`,
  `push_back`, `last`, `clear(delete)`, `iterate(f)` and `map(f, delete)`,
  plus `len()` and iteration over the contents. If the function given to
  `map` raises, the contents already produced are passed to `delete` and
  the exception propagates.

## Example

```python
from libft.strings import split, strtrim
from libft.convert import atoi
from libft.linkedlist import LinkedList

split("  hello  world ", " ")   # ['hello', 'world']
strtrim("xxhixx", "x")          # 'hi'
atoi("  -42abc")                # -42

numbers = LinkedList([1, 2, 3])
list(numbers.map(lambda n: n * 10))   # [10, 20, 30]
```

## What the package does not do

The package has no formatted-output function, no helpers that write to
file descriptors and no command-line program; it is a library of the
functions listed above only.