"""Small building blocks: number parsing, bit helpers, a bitmap, a memory pool, a logger, linked lists and a ring buffer."""

__version__ = "0.1.0"