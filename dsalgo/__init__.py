"""Classic data structures and algorithms: sorting, searching, lists, stacks, queues, trees and graphs."""

__version__ = "0.1.0"
__all__ = [
    "graphs",
    "linked_lists",
    "searching",
    "sorting",
    "stacks_queues",
    "students",
    "text",
    "trees",
]