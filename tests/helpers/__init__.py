from .trees import build_tree, linux_only, tree_names

__all__ = ["build_tree", "linux_only", "tree_names"]
