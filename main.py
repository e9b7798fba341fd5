import sys

from dheap import DHeap
from dheap.cli import main


if len(sys.argv) > 1:
    sys.exit(main())

keys = [3, 1, 4, 1, 5, 9, 2, 6]

# Create a binary heap (d=2)
print("Creating binary heap...")
heap = DHeap(keys, d=2)

# Test basic properties
print(f"Heap size: {len(heap)}")
print(f"Heap array: {heap.format()}")
print(f"First leaf index: {heap.first_leaf_index()}")
print(f"Extracted max: {heap.extract_max()}")
print(f"Heap array: {heap.format()}")
