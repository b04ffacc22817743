"""Classic data structures: arrays, linked lists, stacks, queues, trees, graphs, hash tables, heaps and tries."""

__version__ = "0.1.0"