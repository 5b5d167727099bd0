from src.binary_heap.binary_heap import BinaryHeapView
from src.binary_heap.heap_algorithms import (
    build_max_heap,
    build_min_heap,
    built_max_heap,
    built_min_heap,
    children,
    heap_extract,
    heap_insert,
    heap_meld,
    heap_pushpop,
    heap_replace,
    heapified,
    heapify,
    is_heap,
    parent,
    sift_down,
    sift_up,
)
from src.binary_heap.heapsort import heapsort, heapsorted
from src.binary_heap.topk import get_topk
from src.tree.bst.binary_search_tree import BSTNode
