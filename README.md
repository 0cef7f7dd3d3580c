# irsolcam

Small helpers for camera control services. The package provides random
identifiers, string splitting and stripping, timestamp and duration
formatting, and conversion between text and raw bytes. It has no
dependencies beyond the standard library.

## Installation

```
pip install irsolcam
```

## Usage

```python
import time

from irsolcam import utils

utils.uuid()                                 # e.g. '3f2a9c1e-7b4d-4a1f-9c2e-5d8b7a6f1e03'

utils.split("Hello world", "l")              # ['He', 'o wor', 'd']
utils.strip(" \tHello world\n \r")           # 'Hello world'
utils.strip("Hello world", "Hd")             # 'ello worl'
utils.strip_string("Hello world", "Hello ")  # 'world'

utils.duration_to_string(0)                  # '0ns'
utils.duration_to_string(4030)               # '4us 030ns'  (argument in nanoseconds)
utils.duration_to_string(200_000_000_000)    # '3minutes 20s'

utils.timestamp_to_string(time.monotonic_ns())  # e.g. '2024-05-01 12:34:56.789012'

utils.string_to_bytes("abc")                 # b'abc'
utils.bytes_to_string(b"Hello !")            # 'Hello !'
```

## Functions

All functions live in `irsolcam.utils`.

- `uuid()` – a random version-4 UUID in canonical lower-case text form.
- `split(s, delimiter)` – split on a single character, dropping empty
  pieces. Raises `ValueError` if `delimiter` is not exactly one character.
- `strip(s, delimiters)` – remove every leading and trailing character that
  occurs in `delimiters` (space, tab, newline, vertical tab, form feed and
  carriage return by default).
- `strip_string(s, stripped)` – remove the whole substring `stripped` once
  from the start and once from the end of `s`; an empty `stripped` leaves
  `s` unchanged.
- `timestamp_to_string(tp)` – take a `time.monotonic_ns()` reading and
  render the matching moment as local wall-clock time,
  `YYYY-MM-DD HH:MM:SS.ffffff`.
- `duration_to_string(duration_ns)` – break a duration in nanoseconds into
  hours, minutes, seconds, ms, us and ns, leaving out units that are zero
  and trimming leading zeros and spaces.
- `string_to_bytes(s)` / `bytes_to_string(data)` – convert between text and
  raw bytes using UTF-8; undecodable bytes survive a round trip through
  `bytes_to_string` and back.

## What this package does not do

It offers no camera access: it cannot connect to, discover or configure
cameras, and it contains no server, command-line tool or message protocol.
It is a library of helper functions only.

## Running the tests

```
pip install irsolcam[test]
pytest
```