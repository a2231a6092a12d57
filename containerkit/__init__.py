"""Doubly linked list, deque and unordered set containers."""

__version__ = "0.1.0"