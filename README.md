# libft

A small collection of everyday helpers. It covers ASCII character classes,
byte buffers, C-style string routines, formatted output, buffered line
reading and a singly linked list. It needs nothing beyond the standard
library.

## Installation

```
pip install .
```

## Modules

- `libft.chars`: `isalnum`, `isalpha`, `isascii`, `isdigit`, `isprint`,
  `tolower`, `toupper`. Each accepts an integer code or a one-character
  string, and the case converters return the same kind they were given.
- `libft.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove`. They work on `bytearray` (or `memoryview`) buffers
  and raise `ValueError` when a byte count is negative or longer than a
  buffer. `memchr` returns an index or `None`.
- `libft.strings`: `atoi`, `itoa`, `strlen`, `strchr`, `strrchr`,
  `strncmp`, `strcmp`, `strnstr`. Strings are read up to their first NUL
  character. Searches return an index or `None`. `itoa` raises
  `OverflowError` outside the 32-bit signed range.
- `libft.text`: `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `strmapi`, `striteri`, `split`. `strlcpy` and `strlcat`
  return a tuple of the resulting text and the length they tried to
  create. `striteri` works in place on a mutable sequence.
- `libft.output`: `putchar`, `putstr`, `putendl`, `putnbr`, `put_base`,
  `sprintf`, `printf`. Writers take an optional text stream (standard
  output by default) and return the number of characters written.
  `sprintf` understands `%c %s %d %i %u %x %X %p` and `%%`, and drops a
  `%` followed by any other character.
- `libft.lines`: `LineReader`, which reads any object with a
  `read(size)` method through a fixed-size buffer (42 by default) and
  returns lines as `str` or `bytes` through `next_line()` or iteration.
- `libft.linked_list`: `Node` and `LinkedList`, with `push_front`,
  `push_back`, `last`, `len()`, iteration, `clear`, `iterate` and `map`.

## Examples

```python
from libft.strings import atoi, itoa
from libft.text import split, strtrim, strlcpy
from libft.output import sprintf
from libft.linked_list import LinkedList

atoi("  -42abc")              # -42
itoa(-2147483648)             # "-2147483648"
split("  hello  world ", " ") # ["hello", "world"]
strtrim("xxhixx", "x")        # "hi"
strlcpy("hello", 3)           # ("he", 5)
sprintf("%d in hex is %x", 255, 255)  # "255 in hex is ff"

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda x: x * 10, None))  # [0, 10, 20, 30]
```

Reading lines:

```python
import io
from libft.lines import LineReader

reader = LineReader(io.StringIO("first\nsecond"), 42)
list(reader)  # ["first\n", "second"]
```

## What it does not do

This is a library only: it has no command-line program, and `LineReader`
reads from stream objects rather than from raw file descriptors.

## Running the tests

```
pip install .[test]
pytest
```