import logging
from typing import Any

from src.binary_heap.binary_heap import BinaryHeapView
from src.binary_heap.heap_algorithms import heap_insert, heap_pushpop
from src.binary_heap.heapsort import heapsorted

logger = logging.getLogger(__name__)


def get_topk(heap: BinaryHeapView, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    In case of a max heap, the K greatest elements will be retrieved; for a
    min heap the K least elements. In general, the K elements the heap's
    order puts first, listed in that order. The heap itself is not modified.

    Parameters
    ----------
    heap : BinaryHeapView
        A BinaryHeapView object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    order = heap.order

    def inverted(a, b):
        return order(b, a)

    # bounded heap holding the best k seen so far, worst of them on top
    best: list[Any] = []
    for element in heap:
        if len(best) < k:
            heap_insert(best, element, inverted)
        else:
            heap_pushpop(best, element, inverted)

    logger.debug("get_topk: selected %d of %d elements", len(best), len(heap))
    return heapsorted(best, order)
