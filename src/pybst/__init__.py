"""
PyBST: Unbalanced binary search tree with parent links

Python port of the BinarySearchTree from a JavaScript data structures library.
"""

__version__ = "0.1.0"

from .bstree import BSTNode, BinarySearchTree, OrderedTree

__all__ = [
    "BSTNode",
    "BinarySearchTree",
    "OrderedTree",
]
