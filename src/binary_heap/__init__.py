from src.binary_heap.binary_heap import BinaryHeapView
from src.binary_heap.topk import get_topk
