from src.tree.bst.binary_search_tree import BSTNode
