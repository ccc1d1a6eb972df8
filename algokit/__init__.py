"""Classic data structures and algorithms: sorts, searches, linked lists,
stacks, queues, records and search trees."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "bst",
    "dynamic",
    "errors",
    "linked",
    "queues",
    "rbtree",
    "records",
    "search",
    "sorting",
    "stacks",
]