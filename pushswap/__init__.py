"""Sort integers with two stacks and a limited set of operations, and check the result."""

__version__ = "1.0.0"