# gpgmm

Small building blocks for GPU memory managers in Python. The package has no
dependencies outside the standard library.

## What is inside

- `gpgmm.math` has bit and alignment helpers: `scan_forward`, `log2`,
  `next_power_of_two`, `prev_power_of_two`, `is_power_of_two`, `is_aligned`,
  `align_to_power_of_two`, `align_to` and `round_up`.
  - Invalid input such as zero or a negative number raises `ValueError`.
  - A result that would not fit the given bit width raises `OverflowError`.
- `gpgmm.flags` provides `Flags`, an integer bit set built from enum members,
  plain integers or other `Flags`.
  - It supports `&`, `|`, `^` and `~`, in both operand orders.
  - It compares equal to those same types and converts with `int()`.
- `gpgmm.utils` provides:
  - `to_string` and `address_of`, which returns a hexadecimal identity string.
  - The sentinels `INVALID_OFFSET`, `INVALID_SIZE` and `INVALID_INDEX`. Each equals the largest 64-bit unsigned value.
  - A `NonCopyable` base. Calling `copy.copy` or `copy.deepcopy` on it raises `TypeError`.
- `gpgmm.json_encoder` provides `JSONDict` and `JSONArray`, which build JSON
  text one item at a time.
  - Values can be strings, booleans (written as `1`/`0`), integers, floats, or nested dicts and arrays.
  - Strings are not escaped.
- `gpgmm.linked_list` provides `LinkNode` and `LinkedList`, an intrusive
  circular doubly linked list.
  - Insertion and removal take O(1) time.
  - The list supports forward and reverse iteration, `len()` and `remove_all()`.
- `gpgmm.refcount` provides `RefCounted`, a thread-safe reference count.
  - `ScopedRef` holds a reference on a `RefCounted` object and drops it on `release()` or when a `with` block ends.
- `gpgmm.log` provides severity-filtered log messages: `LogSeverity`,
  `LogMessage`, `debug_log`, `info_log`, `warning_log`, `error_log` and `log`.
  - `set_log_message_level` and `get_log_message_level` set and read the global level.
  - `ScopedLogLevel` sets the level for a `with` block.
  - `gpgmm_assert` and `handle_assertion_failure` log an assertion failure with its location, then raise `AssertionError`.
- `gpgmm.platform` provides:
  - `get_path_separator`, `get_environment_var`, `set_environment_var`, `get_executable_path`, `get_executable_directory` and `get_pid`.
  - `PlatformTime`, which gives absolute, relative and elapsed time in seconds from an injectable clock.
  - `create_platform_time`, which returns a `PlatformTime` backed by `time.perf_counter`.
- `gpgmm.residency_set` provides `ResidencySet`, which collects distinct heaps in
  insertion order. Inserting `None` or a heap that is already present raises
  `ValueError`.

## Installation

```
pip install .
```

## Examples

```python
from gpgmm.math import align_to, next_power_of_two

align_to(13, 8, 64)        # 16
next_power_of_two(33)      # 64
```

```python
from gpgmm.linked_list import LinkNode, LinkedList

class Block(LinkNode):
    def __init__(self, size):
        super().__init__()
        self.size = size

lru = LinkedList()
a, b = Block(1), Block(2)
lru.append(a)
lru.append(b)
a.remove_from_list()
[n.size for n in lru]      # [2]
```

```python
from gpgmm.log import LogSeverity, ScopedLogLevel, warning_log

with ScopedLogLevel(LogSeverity.ERROR):
    with warning_log() as message:
        message << "suppressed"   # below the level, so nothing is printed
```

Log lines go to standard output for debug and info messages. Warning and
error messages go to standard error. Each line has the form
`GPGMM <Severity> (tid:<thread id>): <text>`.

## What this package does not do

The package contains no memory allocator, no heaps and no residency manager. It does
not talk to a GPU or a graphics API. `ResidencySet` only records which heap
objects you give it, and nothing here makes them resident or evicts them. It
has no reference-counted COM-style base object and no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```