"""Heap growth bounded by the reserved stack region."""

from __future__ import annotations

import errno


class HeapExhausted(MemoryError):
    """The heap would grow into the reserved stack."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"cannot grow heap by {requested} bytes; {available} bytes left"
        )
        self.errno = errno.ENOMEM
        self.requested = requested
        self.available = available


class Heap:
    """Break-pointer allocator between the end of static data and the stack.

    ``end`` is the first free address after static data, ``estack`` the top
    of RAM, and ``min_stack_size`` the bytes kept free below it for the stack.
    """

    def __init__(self, end: int, estack: int, min_stack_size: int) -> None:
        self.end = end
        self.limit = estack - min_stack_size
        self._heap_end: int | None = None

    @property
    def heap_end(self) -> int:
        """Current break; the start of the heap until the first allocation."""
        return self.end if self._heap_end is None else self._heap_end

    def sbrk(self, incr: int) -> int:
        """Move the break by ``incr`` bytes and return its previous position."""
        if self._heap_end is None:
            self._heap_end = self.end
        if self._heap_end + incr > self.limit:
            raise HeapExhausted(incr, self.limit - self._heap_end)
        previous = self._heap_end
        self._heap_end += incr
        return previous