# bwkit

A compact library of building blocks for small command-line utilities and
report generators.

## Modules

- **`bwkit.log`** – prefixed log lines (`Error(...)`, `Warning(...)`,
  `Info(...)`, `Debug(...)`) written to standard error, or appended to a
  file after `reopen(path)`; `close()` goes back to standard error.
  `error()`, `error_int()`, `error_null_parameter()` and `perror()` log
  the line and then raise `FatalError`. Helpers such as `info_int`,
  `debug_size`, `debug_point`, `debug_rect` and `debug_rgb` format their
  values into the message.
- **`bwkit.console`** – `Console`, which writes to a given stream or to the
  current `sys.stdout`, with `print`, `println`, `printf`, `print_int`,
  `print_unsigned`, `newline` and `flush`. `singleton()` returns a shared
  console.
- **`bwkit.arrays`** – `Array`, an ordered collection whose `in` test
  compares by identity. `object_at`, `first` and `last` return `None`
  instead of raising when there is nothing there.
- **`bwkit.mutable_array`** – `MutableArray`, an `Array` with `append`,
  `insert`, `remove`, `remove_at`, `remove_first`, `remove_last` and
  `clear`. Appending or inserting `None` raises `log.FatalError`;
  removing an object that is not present logs a warning and returns `None`.
- **`bwkit.boxed`** – immutable `Int` (wrapped to 64 bits) and `Double`
  values with `as_long_long`, `as_double` and `as_bool`. `Int.from_cstring`
  parses a leading decimal number the way `atoi` does, `Int.from_double`
  truncates toward zero, and `Double.as_long_long` takes the floor.
- **`bwkit.mutable_string`** – `MutableString`, a string that is set,
  appended to and truncated in place; each mutator returns the new length.
- **`bwkit.image`** – `Image`, a grid of 32-bit RGB values stored top row
  first. `pixel_at` returns 0 outside the image, `bmp_bytes()` encodes an
  uncompressed 24-bit BMP, and `write_bmp(path)` saves it. A zero-width or
  zero-height image raises `log.FatalError` when encoded.
- **`bwkit.cpu`** – `CPUCharacteristics`, a record of processor vendor and
  feature flags. `from_features()` builds one from a vendor string and
  flag names, `detect()` recognises ARM machines, and `feature_names()`,
  `characteristics_lines()` and `print_characteristics()` report them.
  `decode_cache_info()` and `describe_cache()` turn the four registers of
  a cache-parameters leaf into a `CacheInfo` and a one-line description.
  `cpu_string()` describes the host processor and operating system, reading
  `/proc/cpuinfo` and running `uname` (or `sysctl` on macOS).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from bwkit import log

log.warning("loader", "cache is cold")   # Warning(loader): cache is cold
log.info_int("loader", "entries", 42)     # Info(loader): entries = 42
```

```python
from bwkit.image import Image

image = Image(2, 1, [0xFF0000, 0x00FF00])
image.pixel_at(1, 0)      # 0x00FF00
image.write_bmp("tiny.bmp")
```

```python
from bwkit.cpu import CPUCharacteristics, decode_cache_info, describe_cache

cpu = CPUCharacteristics.from_features("GenuineIntel", ["sse2", "avx", "avx2"])
cpu.feature_names()       # ['SSE2', 'AVX', 'AVX2']

info = decode_cache_info([0x21, 0x01C0003F, 63, 0])
print(describe_cache(0, info))   # an 8-way, 64-set L1 data cache of 32k
```

## What it does not do

- `Image` only holds pixels and writes BMP files; there are no drawing
  operations (lines, rectangles, text) and no bitmap fonts.
- `CPUCharacteristics` does not execute CPUID itself; x86 flags and cache
  registers have to be supplied by the caller.
- There is no command-line program; everything is used as a library.