"""LIFO stacks, one bounded and array backed, one built from linked nodes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.errors import EmptyError, FullError

MAX_SIZE = 1000


class ArrayStack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = MAX_SIZE, items: Iterable[Any] = ()) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise FullError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise FullError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds no values."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.capacity}, {self._items!r})"


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: _Node | None) -> None:
        self.data = data
        self.next = next_node


class LinkedStack:
    """An unbounded stack of linked nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._top: _Node | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise EmptyError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise EmptyError("stack underflow")
        return self._top.data

    def is_empty(self) -> bool:
        """Return True if the stack holds no values."""
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)[::-1]!r})"


_MENU = "\n".join(
    (
        "1. Insert into STACK.",
        "2. Delete from STACK.",
        "3. Show Top Element from STACK",
        "4. Display STACK",
        "5.EXIT",
    )
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu over a stack."""
    parser = argparse.ArgumentParser(prog="dsakit-stack", description="Interactive stack.")
    parser.add_argument("--linked", action="store_true", help="use the linked-node stack")
    parser.add_argument(
        "--capacity", type=int, default=MAX_SIZE, help="capacity of the array stack"
    )
    args = parser.parse_args(argv)

    stack: ArrayStack | LinkedStack
    try:
        stack = LinkedStack() if args.linked else ArrayStack(args.capacity)
    except ValueError as exc:
        print(f"error: {exc}")
        return 1

    while True:
        print(_MENU)
        try:
            choice = input().strip()
            if choice == "1":
                value = int(input("Enter the value to be Inserted: "))
                stack.push(value)
                print(f"{value} pushed into stack.\n")
            elif choice == "2":
                print(f"Popped {stack.pop()} from the stack.")
            elif choice == "3":
                print(f"Top element is : {stack.peek()}")
            elif choice == "4":
                if stack.is_empty():
                    print(" Stack is empty.")
                else:
                    print("Stack elements: ")
                    print("  ".join(str(v) for v in stack))
            elif choice == "5":
                return 0
            else:
                print("Invalid choice. Please choose a valid option.")
        except EOFError:
            return 0
        except EmptyError:
            print("Stack Underflow!")
        except FullError:
            print("Stack Overflow!")
        except ValueError:
            print("Invalid number.")