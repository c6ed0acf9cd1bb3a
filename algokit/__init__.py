"""Classic data structures: stacks, queues, expression helpers, binary trees, BST and AVL trees."""

__version__ = "0.1.0"