"""Circular queues, one on a ring of linked nodes and one on a fixed array."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.errors import EmptyError, FullError


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node = self


class LinkedCircularQueue:
    """An unbounded FIFO queue whose last node links back to the first."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._rear: _Node | None = None
        self._size = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        node = _Node(value)
        if self._rear is not None:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self._rear is None:
            raise EmptyError("queue is empty")
        front = self._rear.next
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.data

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return self._rear is None

    def __iter__(self) -> Iterator[Any]:
        if self._rear is None:
            return
        node = self._rear.next
        for _ in range(self._size):
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ArrayCircularQueue:
    """A FIFO queue of fixed capacity stored in a wrapping array."""

    def __init__(self, capacity: int, items: Iterable[Any] = ()) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear; raise FullError when no slot is free."""
        if self.is_full():
            raise FullError("queue is full")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise EmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return self._size == 0

    def is_full(self) -> bool:
        """Return True if every slot is taken."""
        return self._size == self.capacity

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.capacity}, {list(self)!r})"


_MENU = "\n".join(
    (
        "",
        "1. Insert element into the queue.",
        "2. Delete elements from queue.",
        "3. Display Queue",
        "4. Exit",
    )
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu over a circular queue."""
    parser = argparse.ArgumentParser(
        prog="dsakit-queue", description="Interactive circular queue."
    )
    parser.add_argument("--linked", action="store_true", help="use the linked-node queue")
    parser.add_argument("--size", type=int, help="capacity of the array queue")
    args = parser.parse_args(argv)

    queue: LinkedCircularQueue | ArrayCircularQueue
    try:
        if args.linked:
            queue = LinkedCircularQueue()
        else:
            size = args.size
            if size is None:
                size = int(input("Enter the size of the circular queue: "))
            queue = ArrayCircularQueue(size)
    except EOFError:
        return 0
    except ValueError as exc:
        print(f"error: {exc}")
        return 1

    while True:
        print(_MENU)
        try:
            choice = input("Enter your choice: ").strip()
            if choice == "1":
                value = int(input("Enter the value to enqueue: "))
                queue.enqueue(value)
                print(f"Enqueued {value} into the queue.")
            elif choice == "2":
                print(f"Dequeued {queue.dequeue()} from the queue.")
            elif choice == "3":
                if queue.is_empty():
                    print("The queue is empty.")
                else:
                    print("Queue elements are: " + " ".join(str(v) for v in queue))
            elif choice == "4":
                return 0
            else:
                print("Invalid choice. Please try again.")
        except EOFError:
            return 0
        except EmptyError:
            print("Queue Underflow! The queue is empty.")
        except FullError:
            print("Queue OverFlow!")
        except ValueError:
            print("Invalid number.")