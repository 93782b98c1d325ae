"""Small, readable algorithms and containers: searching, sorting, arrays, patterns, conversions, stacks and queues."""

__version__ = "0.1.0"