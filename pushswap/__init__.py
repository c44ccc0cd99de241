"""Sort integers with two stacks and a fixed set of stack operations."""

__version__ = "0.1.0"
__all__ = ["cli", "cost", "operations", "parsing", "queries", "sorting", "stack"]