"""First-fit memory pool allocator working on address offsets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

HEADER_SIZE = 16
ALIGNMENT = 4

MEMPOOL_DEFAULT = 0
MEMPOOL_TESTCASE = 1

DEFAULT_POOL_SIZE = 4 * 1024
TESTCASE_POOL_SIZE = 2 * 1024


@dataclass(eq=False)
class _Block:
    offset: int
    size: int
    free: bool = True
    prev: Optional["_Block"] = None
    next: Optional["_Block"] = None

    @property
    def address(self) -> int:
        return self.offset + HEADER_SIZE


class MemoryPool:
    """A region of ``size`` bytes handed out in blocks with headers.

    Addresses are offsets into the pool pointing just past a block header.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("pool size must be positive")
        self.size = size
        self.available = size
        self._head = _Block(0, size)
        self._live: dict[int, _Block] = {}

    def _blocks(self) -> Iterator[_Block]:
        block: Optional[_Block] = self._head
        while block is not None:
            yield block
            block = block.next

    def alloc(self, size: int) -> int:
        """Reserve ``size`` bytes and return their address.

        Raises ValueError for a non-positive size and MemoryError when no
        free block is large enough.
        """
        if size <= 0:
            raise ValueError("allocation size must be positive")

        span = ((size + ALIGNMENT - 1) & ~(ALIGNMENT - 1)) + HEADER_SIZE
        required = span + HEADER_SIZE

        for block in self._blocks():
            if block.free and block.size > required:
                rest = _Block(
                    block.offset + span,
                    block.size - required,
                    prev=block,
                    next=block.next,
                )
                if block.next is not None:
                    block.next.prev = rest
                block.next = rest
                block.size = required
                block.free = False
                self.available -= required
                self._live[block.address] = block
                return block.address

        raise MemoryError(f"no free block for {size} bytes")

    def free(self, address: int) -> None:
        """Release the block at ``address``; unknown or freed addresses are ignored."""
        block = self._live.pop(address, None)
        if block is None:
            return

        self.available += block.size
        block.free = True
        prev, nxt = block.prev, block.next

        if nxt is not None and nxt.free:
            block.size += nxt.size
            block.next = nxt.next
            if nxt.next is not None:
                nxt.next.prev = block

        if prev is not None and prev.free:
            prev.size += block.size
            prev.next = block.next
            if block.next is not None:
                block.next.prev = prev

    def is_clean(self) -> bool:
        """Return whether every allocation has been released."""
        return self.available == self.size


class MemoryPools:
    """A numbered set of memory pools."""

    def __init__(
        self, sizes: Iterable[int] = (DEFAULT_POOL_SIZE, TESTCASE_POOL_SIZE)
    ) -> None:
        self._pools = [MemoryPool(size) for size in sizes]

    def _pool(self, pool: int) -> MemoryPool:
        if not 0 <= pool < len(self._pools):
            raise ValueError(f"no memory pool {pool}")
        return self._pools[pool]

    def alloc(self, size: int, pool: int = MEMPOOL_DEFAULT) -> int:
        """Allocate ``size`` bytes from pool number ``pool``."""
        return self._pool(pool).alloc(size)

    def free(self, pool: int, address: int) -> None:
        """Release ``address`` in pool number ``pool``."""
        self._pool(pool).free(address)

    def is_clean(self, pool: int) -> bool:
        """Return whether pool number ``pool`` has no live allocations."""
        return self._pool(pool).is_clean()

    def is_clean_all(self) -> bool:
        """Return whether no pool has live allocations."""
        return all(pool.is_clean() for pool in self._pools)