"""Stack structures and bracket matching."""

from __future__ import annotations

_OPENER_FOR = {")": "(", "]": "[", "}": "{"}


class MinStack:
    """A stack that also reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._items: list = []
        self._minimums: list = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x) -> None:
        """Push ``x`` onto the stack."""
        self._items.append(x)
        if not self._minimums or x <= self._minimums[-1]:
            self._minimums.append(x)

    def pop(self):
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty MinStack")
        value = self._items.pop()
        if value == self._minimums[-1]:
            self._minimums.pop()
        return value

    def top(self):
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of empty MinStack")
        return self._items[-1]

    def get_min(self):
        """Return the smallest item currently on the stack."""
        if not self._minimums:
            raise IndexError("minimum of empty MinStack")
        return self._minimums[-1]


def is_valid_parentheses(s: str) -> bool:
    """Return True if every closing bracket in ``s`` closes the latest open one.

    Any character that is not a closing bracket is treated as an opener, so
    the string must consist of matched bracket pairs only.
    """
    pending: list[str] = []
    for char in s:
        opener = _OPENER_FOR.get(char)
        if opener is None:
            pending.append(char)
        elif not pending or pending.pop() != opener:
            return False
    return not pending