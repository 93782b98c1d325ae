"""Exceptions raised by the data structures and array helpers."""


class StructureError(Exception):
    """Base class for errors raised by dsakit containers."""


class EmptyError(StructureError, IndexError):
    """An element was requested from an empty container (underflow)."""


class FullError(StructureError, OverflowError):
    """An element was added to a container that has no room left (overflow)."""


class InvalidPositionError(StructureError, IndexError):
    """A position given to an insert or delete operation is out of range."""