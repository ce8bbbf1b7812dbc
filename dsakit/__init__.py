"""Classic data structures and algorithms: arrays, matrices, stacks, expression
conversion, queues, priority queues, hash tables, linked lists, binary search
trees, a max-heap and an AVL tree."""

__version__ = "0.1.0"