from src.binary_heap import BinaryHeapView, get_topk
from src.binary_heap.heapsort import heapsorted


priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]

# Create a max heap
print("Creating max heap...")
heap = BinaryHeapView.max_heap(priorities)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Top element: {heap.peek}")
print(f"Top 3: {get_topk(heap, 3)}")
print(f"Pushpop 30.0: {heap.pushpop(30.0)}")
print(f"Pop: {heap.pop()}")
print(f"Sorted ascending: {heapsorted(priorities)}")
