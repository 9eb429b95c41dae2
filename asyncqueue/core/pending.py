"""FIFO storage for tasks that have not been admitted yet."""

from __future__ import annotations

from collections.abc import Iterator

from .task import Task


class PendingList:
    """Singly-linked list of pending tasks.

    ``append`` and ``pop_head`` are O(1). ``length`` walks the list and is
    meant for diagnostics, not for the admission path; use truthiness to ask
    whether anything is pending.
    """

    def __init__(self):
        self.head: Task | None = None
        self.tail: Task | None = None

    def append(self, task: Task) -> None:
        if self.tail is not None:
            self.tail.next = task
        else:
            self.head = task
        self.tail = task

    def pop_head(self) -> Task | None:
        """Unlink and return the first task, or None if the list is empty."""
        task = self.head
        if task is None:
            return None

        self.head = task.next
        if self.head is None:
            self.tail = None
        task.next = None
        return task

    def length(self) -> int:
        count = 0
        node = self.head
        while node is not None:
            count += 1
            node = node.next
        return count

    def is_consistent(self) -> bool:
        """Check that head and tail agree and that head reaches tail."""
        if self.head is None or self.tail is None:
            return self.head is None and self.tail is None

        node = self.head
        while node.next is not None:
            node = node.next
        return node is self.tail

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return self.head is not None

    def __iter__(self) -> Iterator[Task]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"PendingList(length={self.length()})"
