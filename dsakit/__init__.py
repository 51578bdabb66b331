"""Classic data structures and algorithms: search trees, binary tree helpers, stacks, queues, infix conversion and bank accounts."""

__version__ = "0.1.0"

__all__ = ["accounts", "avl", "binary_tree", "bst", "infix", "queues", "stacks"]