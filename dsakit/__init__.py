"""Classic data structures and algorithms: stacks, queues, linked lists, sorting, recursion and expressions."""

__version__ = "0.1.0"
__all__ = ["arrays", "containers", "expressions", "linked_list", "oops", "recursion", "sorting"]