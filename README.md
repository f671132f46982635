# ari

A collection of small helpers for everyday Python code: comparison, key/value
helpers, hex and human-readable formatting, SHA digests and SipHash, ASCII and
UTF-16 text utilities, whole-file I/O, directory enumeration, path building,
reset events and timing.

It is a library only; it installs no commands.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `ari.cmp`: `partial_min` and `partial_max` (the first argument wins ties; with an unordered pair such as NaN the second is returned) and `compare_floating`, a three-way comparison that orders NaN last and works with `functools.cmp_to_key`.
- `ari.keyvalue`: `keys` and `values` over `(key, value)` pairs; `hash_map` and `btree_map` build dicts from pairs (`btree_map` orders by key), `hash_set` builds a set and `btree_set` a sorted list of distinct values.
- `ari.console`: `clear` and `clear_into` write the ANSI clear-screen and cursor-home sequence to stdout or to any text or binary stream.
- `ari.core`: `BitField`, bit-level access to a byte buffer (bits numbered from the least significant bit of the first byte; `get_value`/`set_value` handle fields up to 64 bits wide, truncating on write); `BlackHole`, an opaque exception; `as_list`, `option_as_list`, `bool_as_option`; `initialize` and `initialized`.
- `ari.mathutil`: `lerp` and `bounded_lerp` (amount clamped to `[0, 1]`).
- `ari.hexfmt`: `to_hex`, `to_upper_hex` and `from_hex`. `from_hex` ignores spaces, tabs, CR and LF, and raises `ValueError` on other characters or an odd number of digits.
- `ari.human`: `formatted_duration` (`HH:MM:SS`, prefixed by `Nd ` when it spans days), `human_duration` (largest whole unit, long or short form), `human_bytes` and `human_detailed_bytes` (binary units B to EiB). Durations may be numbers of seconds or `datetime.timedelta`.
- `ari.hashing`: SHA-1/256/384/512 via `HashAlgorithm`, `IncrementalHash`, `hash_slice` and `hash_read`; digests are returned as `bytes`. An `IncrementalHash` cannot be used after `finish`.
- `ari.siphash`: `SipHasher24` and `SipHasher13`, keyed 64-bit hashers with `write`, `write_u8`, `write_usize`, `finish` and `copy`. Not for cryptographic use.
- `ari.text`: display-width-aware padding (`pad`, `pad_left`, `pad_right`, `pad_left_with`, `pad_right_with`, `pad_to_width_with_alignment`, `TextAlignment`) and UTF-16 code-unit conversions (`to_utf16`, `to_utf16_null`, `from_utf16`, `from_utf16_null`, `from_utf16_lossy`, `from_utf16_lossy_null`).
- `ari.ascii`: ASCII-only predicates (`is_ascii_digit`, `is_ascii_punctuation`, ...) and case mappings for byte values, `str` and bytes-like objects. Predicates are true for empty input.
- `ari.ioext`: `read_as_string`, `read_as_bytes`, `read_vec` (exact reads, `EOFError` on short input), `read_bytes_16`, `read_bytes_32`, `position` and `read_enter_key`.
- `ari.fsutil`: `file_exists`, `directory_exists`, `read_all_bytes`, `write_all_bytes`, `read_all_text`, `read_all_lines`, `write_all_text`, `replace` (moves a file over another through a backup and restores it on failure), `allocation_size`, `set_allocation_size`, and volume figures through `get_volume_information`/`VolumeInformation` and its shortcuts.
- `ari.enumerate`: `entries`, `files` and `directories`, depth first, top level only or recursive (`SearchOption`), yielding `FsEntry` objects. Symbolic links are not followed.
- `ari.pathutil`: `build_path` and `path_append`, which split later parts on `/` and `\` and always treat them as relative, and `volume_name`.
- `ari.events`: `AutoResetEvent` and `ManualResetEvent` with `set`, `reset`, `wait`, `wait_until` (a `time.monotonic()` deadline), `wait_duration` and `wait_ms`; and the shared booleans `AtomicArBool` and `AtomicRelaxedBool`.
- `ari.stopwatch`: `Stopwatch` (elapsed time as `timedelta` or whole seconds/ms/µs/ns), `FpsClock` and its read-only view `Fps`.
- `ari.randstr`: `random_string`, `alpha_string`, `alphanumeric_string`, `random_bytes`, `array_16` and `array_32`, all drawn from `secrets`.

## Examples

```python
from ari.core import BitField
from ari.hexfmt import to_hex, from_hex
from ari.human import human_bytes, human_duration
from ari.pathutil import build_path
from ari.siphash import SipHasher24

field = BitField(bytearray(4))
field.set(0, True)
field.set_value(20, 3, 7)
print(field.value())              # b'\x01\x00p\x00'

print(to_hex(b"\x01\xab"))        # 01ab
print(from_hex("01 ab"))          # b'\x01\xab'

print(human_bytes(1536))          # 1.50 KiB
print(human_duration(3600))       # 1 hour
print(human_duration(3600, True)) # 1h

print(build_path("/var", "/bin", "/ari/hello.so"))  # /var/bin/ari/hello.so

hasher = SipHasher24()
hasher.write(b"hello")
print(hasher.finish())
```

```python
import threading
from ari.events import AutoResetEvent

event = AutoResetEvent(False)
threading.Timer(0.1, event.set).start()
event.wait()  # returns once another thread calls set()
```

## Limitations

- `set_allocation_size` only preallocates where `os.posix_fallocate` exists; elsewhere it does nothing.
- `get_volume_information` uses `os.statvfs` where available; otherwise it falls back to `shutil.disk_usage`, reporting free space as both free and available bytes.
- `initialize` only records that it has run; there is no platform-specific setup.