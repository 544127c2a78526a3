# egoskit

egoskit collects the building blocks of a small teaching operating system as
plain Python. Each module works and can be tested on its own. The package
needs nothing beyond the standard library.

## Modules

- `egoskit.dequeue`: `Queue` accepts any item except `None`. It has
  `prepend` (add at the head), `append` (add at the tail), `dequeue`
  (remove from the head) and `iterate(func, arg)`, which calls
  `func(item, arg)` from head to tail. `delete(item)` removes the first entry
  that is the same object as `item`. `free()` only succeeds on an empty
  queue. The class also supports `len()`, iteration and `reversed()`. Misuse
  raises `QueueError`, for example a `None` item, dequeuing from an empty
  queue, deleting a missing item or freeing a queue that is not empty.
- `egoskit.fifo`: `Fifo` is a first-in first-out queue. `add` puts an item
  at the back and `insert` puts one at the front, so it comes out next.
  `get` raises `IndexError` when the queue is empty. There is also
  `is_empty`. `release` raises `RuntimeError` if items remain.
- `egoskit.ctype`: character classification from a fixed table covering
  EOF (-1) through 255. The functions are `isascii`, `islower`, `isupper`,
  `isalpha`, `isdigit`, `isxdigit`, `isalnum`, `isspace`, `isblank`,
  `isgraph`, `isprint`, `ispunct` and `iscntrl`, along with `toascii`,
  `tolower` and `toupper`. `ctype_flags` returns the raw `CType` bits.
  Arguments may be integer codes or one-character strings.
- `egoskit.cstrings`: C-style routines over `str` (Latin-1) or bytes:
  `memchr`, `memcmp`, `strcmp`, `strncmp`, `strnlen`, `strstr`, `index`,
  `rindex`, `atoi` (32-bit result) and `atol` (64-bit result). The string
  functions stop at the first NUL. A position is returned as an index, and
  `None` means not found.
- `egoskit.stdlib`: `strtol(text, base=10)` and `strtoul(text, base=10)`
  return a `(value, end_index)` pair. `Random(seed=0)` is a linear
  congruential generator with `srand` and `rand`, and `rand` gives values
  from 0 to 32767.
- `egoskit.memchan`: `MemChannel` is an appendable text buffer with `put`,
  `putc`, `puts` and `printf`, plus `getvalue` and `len()`. Its formatter
  handles `%c %d %i %s %u %x %X`. It has no widths or flags, and any other
  character after `%` is written as it stands. `vformat(fmt, args)` and
  `sprintf(fmt, *args)` return the formatted text. `snprintf(size, fmt,
  *args)` returns the text that fits in `size` characters, counting the
  NUL, together with the full length.
- `egoskit.sha256`: `Sha256` is an incremental hasher with `update`,
  `digest` and `hexdigest`. `sha256(data)` computes a digest in one call.
- `egoskit.ema`: `Ema(alpha, clock=None)` is an exponential moving average
  over unevenly spaced samples. `clock` returns milliseconds, and when it is
  omitted a monotonic clock is used. Samples are added with `update`. `avg`
  raises `RuntimeError` until at least one sample has been taken.
- `egoskit.heap`: `Heap(page_size=4096)` is a first-fit allocator over a
  simulated arena of 16-byte headers and blocks. It splits blocks and merges
  free neighbours. The methods are `alloc`, `calloc`, `free`, `realloc`,
  `read`, `write`, `blocks()` (snapshots of `Block` with a `BlockStatus`)
  and `check()`, which verifies the arena's structure. Errors raise
  `HeapError`.
- `egoskit.ramfs`: `RamFileServer` keeps up to 100 files in memory. Inode 0
  is reserved, and each call names the caller's user id. It has `create`,
  `read`, `write`, `stat` (which returns a `FileStat`), `setsize` (which
  can only shrink a file), `chown` (root only), `chmod` (root or the owner)
  and `load(ino, path)`, which fills a file from a local file. Access is
  checked against `Permission` bits: uid 0 may do anything. A refused
  request raises `FileError`.
- `egoskit.cpr`: `filter_lines(lines, keys)` and the `egoskit-cpr` command,
  described below.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from egoskit.dequeue import Queue

q = Queue()
q.append(1)
q.append(2)
q.prepend(0)
assert list(q) == [0, 1, 2]
assert q.dequeue() == 0
assert len(q) == 2
```

```python
from egoskit.memchan import sprintf

assert sprintf("%d items at %x", 12, 255) == "12 items at ff"
```

```python
from egoskit.ramfs import RamFileServer

fs = RamFileServer()
ino = fs.create(uid=5)
fs.write(5, ino, 0, b"hello")
assert fs.read(5, ino, 0, 100) == b"hello"
assert fs.stat(5, ino).size == 5
```

## Stripping marked lines

`egoskit-cpr` copies a source file and leaves out the lines tagged for the
keys you name:

```
egoskit-cpr src.c dst.c KEY1 KEY2
```

A line that contains `//<><>KEY` is dropped. A line that contains
`//<<<<KEY` starts a run of dropped lines, which lasts up to and including
the next line that contains `//>>>>KEY`. The command exits with status 1
if it gets fewer than two paths or cannot open either file. The same
filtering is available in code as `filter_lines(lines, keys)`.

## What it does not do

egoskit is a set of components and cannot boot or run as an operating
system. It has no processes, scheduler, message passing, paging or devices.
`RamFileServer` is an object you call directly, not a server process that
answers requests. The package also has no directory service, no terminal
server and no disk-backed storage.