"""Byte ring buffer with separate read and write positions."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


class RingBuffer:
    """A circular byte buffer of ``size`` bytes.

    One slot is always kept free to tell a full buffer from an empty one,
    so at most ``size - 1`` bytes can be stored at a time.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("ring buffer size must be positive")
        self.size = size
        self.buffer = bytearray(size)
        self.write_pos = 0
        self.read_pos = 0

    def __repr__(self) -> str:
        return (
            f"RingBuffer(size={self.size}, read_pos={self.read_pos}, "
            f"write_pos={self.write_pos})"
        )

    def clear(self) -> None:
        """Discard all stored bytes and rewind both positions."""
        self.read_pos = self.write_pos = 0

    def is_empty(self) -> bool:
        """Return whether there is nothing to read."""
        return self.write_pos == self.read_pos

    def is_full(self) -> bool:
        """Return whether no further byte can be written."""
        if self.read_pos == 0:
            return self.write_pos == self.size - 1
        return self.write_pos == self.read_pos - 1

    def __len__(self) -> int:
        return self.size

    def free_bytes(self) -> int:
        """Return how many bytes can be written."""
        if self.write_pos >= self.read_pos:
            return self.size - self.write_pos + self.read_pos - 1
        return self.read_pos - self.write_pos - 1

    def available_bytes(self) -> int:
        """Return how many bytes can be read."""
        if self.write_pos >= self.read_pos:
            return self.write_pos - self.read_pos
        return self.size - self.read_pos + self.write_pos

    def seq_read_len(self) -> int:
        """Return the length of contiguous memory from the read position."""
        return self.size - self.read_pos

    def seq_write_len(self) -> int:
        """Return the length of contiguous memory from the write position."""
        if self.write_pos >= self.read_pos:
            return self.size - self.write_pos
        return self.read_pos - self.write_pos

    def advance_write(self, num: int) -> None:
        """Move the write position forward, e.g. after an external fill."""
        if num < 0:
            raise ValueError("cannot move the write position backwards")
        self.write_pos = (self.write_pos + num) % self.size

    def drop(self, num: int) -> None:
        """Move the read position forward, discarding ``num`` bytes."""
        if num < 0:
            raise ValueError("cannot move the read position backwards")
        self.read_pos = (self.read_pos + num) % self.size

    def write(self, data: BytesLike) -> int:
        """Write as much of ``data`` as fits and return the count written."""
        chunk = bytes(data)[: self.free_bytes()]
        for byte in chunk:
            self.buffer[self.write_pos] = byte
            self.advance_write(1)
        return len(chunk)

    def read(self, size: int) -> bytes:
        """Read and remove up to ``size`` bytes."""
        if size < 0:
            raise ValueError("read size must be non-negative")
        out = bytearray()
        for _ in range(min(size, self.available_bytes())):
            out.append(self.buffer[self.read_pos])
            self.drop(1)
        return bytes(out)

    def write_byte(self, byte: int) -> bool:
        """Write one byte; return False when the buffer is full."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte out of range: {byte}")
        if self.free_bytes() < 1:
            return False
        self.buffer[self.write_pos] = byte
        self.advance_write(1)
        return True

    def read_byte(self) -> Optional[int]:
        """Read and remove one byte; return None when the buffer is empty."""
        if self.available_bytes() < 1:
            return None
        byte = self.buffer[self.read_pos]
        self.drop(1)
        return byte

    def find(self, byte: int) -> Optional[int]:
        """Return the buffer index of the first readable ``byte``, or None."""
        pos = self.read_pos
        for _ in range(self.available_bytes()):
            if self.buffer[pos] == byte:
                return pos
            pos = (pos + 1) % self.size
        return None