"""Binary trees, search trees, AVL trees and max binary heaps built from linked nodes."""

__version__ = "0.1.0"

__all__ = ["node", "measure", "traversal", "rotate", "printing", "bst", "avl", "heap"]