"""Binary trees with parent links: nodes, traversals, metrics and ASCII drawing."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "metrics", "printing"]