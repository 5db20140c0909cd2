"""A last-in-first-out container."""

from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when reading from or popping an empty stack."""

    def __init__(self, message: str = "Stack is empty"):
        super().__init__(message)


class Stack(Generic[T]):
    """LIFO stack of items of a single type.

    State Transitions:
        - Empty → NonEmpty (push)
        - NonEmpty → NonEmpty (push, or pop while more than one item remains)
        - NonEmpty → Empty (pop of the last item, clear)

    pop() and peek() are only valid from NonEmpty and raise
    EmptyStackError otherwise.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyStackError: If the stack has no items.
        """
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyStackError: If the stack has no items.
        """
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(size={len(self._items)})"
