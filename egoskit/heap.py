"""First-fit heap allocator over a simulated, growing memory arena.

The arena is a sequence of headers and blocks.  It starts and ends with a
header; the last header has status ``LAST`` and every other header
describes the block that follows it.  Each header records the size of its
own block and of the block before it, so the arena can be walked in both
directions.  Two free blocks are never next to each other.  Block sizes are
multiples of 16 bytes, and addresses handed out are offsets into the arena.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

HEADER_SIZE = 16
ALIGNMENT = 16
MAX_ALLOC = 10_000_000
DEFAULT_PAGE_SIZE = 4096

BytesLike = Union[bytes, bytearray, memoryview]


class HeapError(Exception):
    """Raised for bad requests or a damaged heap."""


class BlockStatus(enum.Enum):
    """State of a header in the arena."""

    LAST = 0
    FREE = 1
    INUSE = 2


@dataclass(frozen=True)
class Block:
    """A snapshot of one header: where it sits and what it describes."""

    offset: int
    size: int
    prev: int
    status: BlockStatus

    @property
    def address(self) -> int:
        """Address of the first byte of the block that follows the header."""
        return self.offset + HEADER_SIZE


@dataclass
class _Header:
    size: int
    prev: int
    status: BlockStatus


def _round_up(size: int) -> int:
    return (size + ALIGNMENT - 1) & ~(ALIGNMENT - 1)


class Heap:
    """A heap allocator managing its own byte arena."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 2 * HEADER_SIZE or page_size % ALIGNMENT:
            raise HeapError(
                f"page size must be a multiple of {ALIGNMENT} of at least {2 * HEADER_SIZE}"
            )
        self._page_size = page_size
        first_size = page_size - HEADER_SIZE
        self._headers: Dict[int, _Header] = {
            0: _Header(first_size, 0, BlockStatus.FREE),
            page_size: _Header(0, first_size, BlockStatus.LAST),
        }
        self._memory = bytearray(page_size + HEADER_SIZE)

    # -- arena walking -------------------------------------------------

    def _after(self, offset: int) -> int:
        return offset + HEADER_SIZE + self._headers[offset].size

    def _before(self, offset: int) -> int:
        return offset - self._headers[offset].prev - HEADER_SIZE

    def _walk(self) -> Iterator[Tuple[int, _Header]]:
        offset = 0
        while True:
            header = self._headers.get(offset)
            if header is None:
                raise HeapError(f"no header at offset {offset}")
            yield offset, header
            if header.status is BlockStatus.LAST:
                return
            offset = self._after(offset)

    # -- growth ----------------------------------------------------------

    def _extend(self, offset: int, size: int) -> int:
        """Grow the arena at the last header so a block of ``size`` fits."""
        last = self._headers.pop(offset)
        prev = last.prev
        if offset != 0:
            before = offset - prev - HEADER_SIZE
            if self._headers[before].status is BlockStatus.FREE:
                offset = before
                prev = self._headers[before].prev
        block_size = size + self._page_size - HEADER_SIZE
        self._headers[offset] = _Header(block_size, prev if offset else 0, BlockStatus.FREE)
        end = offset + HEADER_SIZE + block_size
        self._headers[end] = _Header(0, block_size, BlockStatus.LAST)
        brk = end + HEADER_SIZE
        if brk > len(self._memory):
            self._memory.extend(bytes(brk - len(self._memory)))
        return offset

    # -- allocation ------------------------------------------------------

    def alloc(self, size: int) -> int:
        """Allocate at least ``size`` bytes and return the block's address."""
        if size <= 0 or size > MAX_ALLOC:
            raise HeapError(f"bad allocation size {size}")
        size = _round_up(size)
        offset = 0
        while True:
            header = self._headers[offset]
            if header.status is BlockStatus.LAST:
                offset = self._extend(offset, size)
                header = self._headers[offset]
            if header.status is BlockStatus.FREE:
                if header.size == size:
                    header.status = BlockStatus.INUSE
                    return offset + HEADER_SIZE
                if header.size >= size + HEADER_SIZE:
                    following = self._after(offset)
                    split = offset + HEADER_SIZE + size
                    rest = header.size - size - HEADER_SIZE
                    self._headers[split] = _Header(rest, size, BlockStatus.FREE)
                    self._headers[following].prev = rest
                    header.size = size
                    header.status = BlockStatus.INUSE
                    return offset + HEADER_SIZE
            offset = self._after(offset)

    def calloc(self, nitems: int, size: int) -> int:
        """Allocate ``nitems * size`` bytes, all set to zero."""
        total = nitems * size
        addr = self.alloc(total)
        self._memory[addr:addr + total] = bytes(total)
        return addr

    def _in_use(self, addr: int) -> int:
        offset = addr - HEADER_SIZE
        header = self._headers.get(offset)
        if header is None or header.status is not BlockStatus.INUSE:
            raise HeapError(f"address {addr} is not an allocated block")
        return offset

    def free(self, addr: Optional[int]) -> None:
        """Return a block to the heap, merging it with free neighbours."""
        if addr is None:
            return
        offset = self._in_use(addr)
        header = self._headers[offset]

        following = self._after(offset)
        if self._headers[following].status is BlockStatus.FREE:
            beyond = self._after(following)
            header.size += HEADER_SIZE + self._headers.pop(following).size
            self._headers[beyond].prev = header.size
            following = beyond

        if offset != 0:
            before = self._before(offset)
            previous = self._headers[before]
            if previous.status is BlockStatus.FREE:
                previous.size += header.size + HEADER_SIZE
                self._headers[following].prev = previous.size
                del self._headers[offset]
                return

        header.status = BlockStatus.FREE

    def realloc(self, addr: Optional[int], size: int) -> int:
        """Allocate a new block of ``size``, move the old contents over and free the old one."""
        new_addr = self.alloc(size)
        if addr is not None:
            old_size = self._headers[self._in_use(addr)].size
            count = min(size, old_size)
            self._memory[new_addr:new_addr + count] = self._memory[addr:addr + count]
            self.free(addr)
        return new_addr

    # -- data access -----------------------------------------------------

    def _check_range(self, addr: int, length: int) -> None:
        if length < 0:
            raise HeapError(f"negative length {length}")
        for offset, header in self._walk():
            start = offset + HEADER_SIZE
            if header.status is BlockStatus.INUSE and start <= addr <= start + header.size:
                if addr + length > start + header.size:
                    raise HeapError(f"access of {length} bytes at {addr} overruns its block")
                return
        raise HeapError(f"address {addr} is not inside an allocated block")

    def read(self, addr: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``addr`` inside an allocated block."""
        self._check_range(addr, size)
        return bytes(self._memory[addr:addr + size])

    def write(self, addr: int, data: BytesLike) -> None:
        """Store ``data`` at ``addr`` inside an allocated block."""
        payload = bytes(data)
        self._check_range(addr, len(payload))
        self._memory[addr:addr + len(payload)] = payload

    # -- inspection ------------------------------------------------------

    def blocks(self) -> List[Block]:
        """Return every header in arena order, ending with the last one."""
        return [
            Block(offset, header.size, header.prev, header.status)
            for offset, header in self._walk()
        ]

    def check(self) -> None:
        """Verify the arena's structure; raise HeapError on the first fault."""
        first = self._headers.get(0)
        if first is None:
            raise HeapError("no first header")
        if first.prev != 0:
            raise HeapError("first header has nonzero prev")
        if first.status is BlockStatus.LAST:
            raise HeapError("first header cannot be the last one")
        prev = 0
        last_status: Optional[BlockStatus] = None
        seen = 0
        for offset, header in self._walk():
            seen += 1
            if offset + HEADER_SIZE > len(self._memory):
                raise HeapError("header beyond break")
            if header.prev != prev:
                raise HeapError(f"bad prev at offset {offset}")
            if header.status is BlockStatus.FREE and last_status is BlockStatus.FREE:
                raise HeapError(f"consecutive free blocks at offset {offset}")
            if header.status is not BlockStatus.LAST and header.size % ALIGNMENT:
                raise HeapError(f"misaligned block size at offset {offset}")
            if header.status is BlockStatus.LAST and offset + HEADER_SIZE != len(self._memory):
                raise HeapError("last header not at break")
            prev = header.size
            last_status = header.status
        if seen != len(self._headers):
            raise HeapError("stray headers outside the chain")