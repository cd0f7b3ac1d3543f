from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Простий LIFO стек для ітеративного повернення (backtracking)."""

    def __init__(self):
        self._items: List[T] = []

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def count(self) -> int:
        return len(self._items)

    def push(self, item: T):
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Знімає верхній елемент. На порожньому стеку повертає None."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[T]:
        """Повертає верхній елемент без видалення (None, якщо стек порожній)."""
        if not self._items:
            return None
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
