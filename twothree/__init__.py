"""A 2-3 search tree of integers: nodes, insertion, deletion, a set wrapper and a timing benchmark."""

__version__ = "0.1.0"