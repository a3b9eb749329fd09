# utilkit

Small, dependency-free helpers for strings, string collections, process
information and timestamps. Everything is plain Python: strings are `str`,
time points are `int` nanoseconds, and failures are raised as exceptions.

## Install

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Modules

### `utilkit.strings`

- `repl_str(text, old, new)` – replace every non-overlapping occurrence of
  `old` with `new`, left to right. An empty `old` raises `ValueError`.
- `strdup(text)` – a copy of `text`; `None` gives `None`.
- `strndup(text, length)` – the first `length` characters of `text`;
  `None` gives `None`, a negative length raises `ValueError`.
- `snprintf(buffer_size, fmt, *args)` / `vsnprintf(buffer_size, fmt, args)` –
  `%`-style formatting into a buffer of `buffer_size` characters. They return
  a `FormatResult(text, length)`: `text` holds at most `buffer_size - 1`
  characters (one is kept for a terminator), and `length` is the full length
  of the formatted string. A buffer size of 0 only measures. A `None` format,
  a negative buffer size or a format that does not match its arguments
  raises `ValueError`.

```python
from utilkit.strings import snprintf

snprintf(4, "%s-%d", "abc", 7)   # FormatResult(text='abc', length=5)
```

### `utilkit.split`

- `split(text, delimiter)` – split on a single-character delimiter,
  dropping empty tokens (leading, trailing and repeated delimiters).
- `split_last(text, delimiter)` – split in two at the last inner delimiter;
  a leading delimiter is ignored and a trailing one is not a split point.
  Without a split point the text is the only element.

Both return an empty list for empty or `None` text and raise `ValueError`
when the delimiter is not a single character.

```python
from utilkit.split import split, split_last

split("/hello/world/", "/")        # ['hello', 'world']
split_last("foo/bar/baz", "/")     # ['foo/bar', 'baz']
```

### `utilkit.string_array`

`StringArray(size)` is a fixed number of slots, each `None` until set.
It supports `len()`, indexing and item assignment (strings or `None`).

- `StringArray.compare(other)` / `string_array_cmp(lhs, rhs)` – compare
  element by element, then by length; returns -1, 0 or 1. An empty slot in
  the compared range raises `StringArrayError`.
- `StringArray.fini()` – release the contents; further use raises
  `StringArrayError`. Calling it again is harmless.

### `utilkit.string_map`

`StringMap(initial_capacity)` maps string keys to string values in a fixed
number of slots.

- `set(key, value)` grows the capacity when needed (doubling it, or to 1
  from 0); `set_no_resize(key, value)` raises `NotEnoughSpaceError` instead.
- `get(key)` returns the value or `None`; `key_exists(key)` and `in` test
  membership.
- `unset(key)` removes a key and raises `KeyNotFoundError` when it is absent.
- `capacity()`, `reserve(capacity)` (never below the current size),
  `clear()` (keeps the capacity) and `len()`.
- `get_next_key(key)` and plain iteration visit keys in slot order.
- `copy_into(other)` sets every entry in another map.
- `fini()` releases the map; further use raises `StringMapError`.

```python
from utilkit.string_map import StringMap

m = StringMap(2)
m.set("key", "value")
m.get("key")          # 'value'
"key" in m            # True
```

### `utilkit.process`

- `get_pid()` – the current process id.
- `get_executable_name()` – the base name the program was started as
  (on Windows without its extension); raises `OSError` when none is known.

### `utilkit.timepoint`

Time points are integer nanoseconds.

- `system_time_now()` / `steady_time_now()` – wall-clock time since the Unix
  epoch and monotonic time; a negative reading raises `TimeError`.
- `s_to_ns(seconds)` – seconds to nanoseconds.
- `as_nanoseconds_string(time_point)` – e.g. `1` gives `"0000000000000000001"`.
- `as_seconds_string(time_point)` – e.g. `1000000000` gives
  `"0000000001.000000000"`; negative values carry a leading `-`.

The formatting functions take signed 64-bit values only: a non-integer
raises `TypeError` and an out-of-range value raises `ValueError`.

## What it does not do

utilkit is a library only: it has no command-line tool.