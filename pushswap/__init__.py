"""Sort distinct integers with two stacks and print the operations that do it."""

__version__ = "0.1.0"