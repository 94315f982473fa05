# tinykit

Small, dependency-free building blocks for byte- and bit-level work.

## Modules

- `tinykit.strarg`: recognise and parse integer arguments in binary (`0b…`),
  decimal or hex (`0x…`) notation, and plain decimal fractions.
  `number_kind` returns a `NumberKind`. `parse_int` returns the 32-bit
  two's-complement pattern of the number. `parse_float` parses values such
  as `-32.75`. Both parsers raise `ValueError` on bad input. `is_num`,
  `is_bin` and `is_hex` test single characters.
- `tinykit.value_ops`: bit helpers on unsigned integers. These are
  `fill_bits`, `fill_range`, `byte_at`, `bit_at`, `bits_at`, `is_pow_of_2`,
  `ff1` (1-based position of the highest set bit) and `reverse_bits`.
  `value_at` reads a bit range that may span two 32-bit words.
- `tinykit.bitmap`: `Bitmap`, a set of small non-negative integers stored in
  32-bit words. It has `add`, `discard`, `in`, `clear` and `find_first_free`.
  Values at or above its `capacity` are ignored.
- `tinykit.mem_pool`: a first-fit block allocator working on address offsets.
  `MemoryPool` has `alloc`, `free` and `is_clean`. `MemoryPools` is a
  numbered set of pools; its defaults are 4 KiB and 2 KiB. `alloc` raises
  `MemoryError` when no block is large enough.
- `tinykit.log`: `Logger` sends printf-style formatted messages to a callable
  when their `LogLevel` is enabled. The levels are ERROR, WARNING, INFO, LOG
  and DEBUG. The `error`, `warning`, `info`, `debug` and `log` methods prefix
  each message with the caller's file, line or function. `dbg` emits a value
  and returns it. Messages are cut to 255 characters.
- `tinykit.linked_list`: `ListNode`, a singly linked node in which any node
  heads its own chain. It is iterable and has `len`, `foreach`, `last`, `at`,
  `append`, `insert` and `remove`.
- `tinykit.ringbuf`: `RingBuffer`, a circular byte buffer. It always keeps one
  slot free, so it holds at most `size - 1` bytes. It has `write`, `read`,
  `write_byte`, `read_byte`, `find`, `drop` and `advance_write`, and reports
  the free, available and contiguous lengths.

## Install

```
pip install .
```

## Examples

```python
from tinykit.strarg import parse_int, parse_float
from tinykit.value_ops import bits_at, ff1, reverse_bits
from tinykit.bitmap import Bitmap
from tinykit.mem_pool import MemoryPool
from tinykit.linked_list import ListNode
from tinykit.ringbuf import RingBuffer

parse_int("0x1F")           # 31
parse_int("0b101")          # 5
parse_int("-1")             # 4294967295
parse_float("-32.75")       # -32.75

bits_at(0xABCD, 4, 11)      # 0xBC
ff1(0x80)                   # 8
reverse_bits(0b0001, 4)     # 0b1000

bm = Bitmap(128)
bm.add(0)
bm.add(1)
1 in bm                     # True
bm.find_first_free()        # 2

pool = MemoryPool(1024)
addr = pool.alloc(10)
pool.is_clean()             # False
pool.free(addr)
pool.is_clean()             # True

head = ListNode(1)
head.append(ListNode(2))
[node.value for node in head]   # [1, 2]

rb = RingBuffer(8)
rb.write(b"hello")          # 5
rb.read(5)                  # b"hello"
```

Logging goes through any callable:

```python
from tinykit.log import Logger, LogLevel

lines = []
logger = Logger(lines.append, LogLevel.DEBUG)
value = logger.dbg("answer", 42)   # emits "answer = " then "0x2A"
```

## What it does not include

This package has no string hash functions and no hash map. It also has no
interactive line console or command dispatcher, so there is no command to
run. It offers only the library pieces listed above.

## Tests

```
pip install .[test]
pytest
```