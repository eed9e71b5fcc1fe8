"""Classic data-structure and algorithm routines: linked lists, stacks and queues, arrays, integer puzzles and expression evaluation."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "containers", "expressions", "linked_list"]