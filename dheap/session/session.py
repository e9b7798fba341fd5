from pathlib import Path
from typing import Optional, Sequence, Union

from dheap.dway_heap.dway_heap import DHeap
from dheap.logger import logger
from dheap.session.loader import read_arrays
from dheap.settings import MAX_ARRAYS, MAX_CAPACITY, MAX_LINE_LENGTH


class Session:
    """
    Interactive state: the arrays loaded from a file and the one heap the
    user picked to work on.
    """

    def __init__(
        self,
        arrays: Sequence[Sequence[int]],
        capacity: Optional[int] = MAX_CAPACITY
    ) -> None:
        self._arrays = [list(array) for array in arrays]
        self._capacity = capacity
        self._heap = None
        self._selected = None

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        capacity: Optional[int] = MAX_CAPACITY,
        max_arrays: int = MAX_ARRAYS,
        max_line_length: int = MAX_LINE_LENGTH
    ) -> "Session":
        return cls(read_arrays(path, max_arrays, max_line_length), capacity)

    def __len__(self) -> int:
        return len(self._arrays)

    @property
    def arrays(self) -> list[list[int]]:
        return [list(array) for array in self._arrays]

    @property
    def selected(self) -> Optional[int]:
        """1-based number of the selected array, None before selection."""
        return self._selected

    @property
    def heap(self) -> DHeap:
        if self._heap is None:
            raise RuntimeError("no array has been selected")
        return self._heap

    @property
    def degree(self) -> int:
        return self.heap.d

    def describe(self) -> list[str]:
        return [
            f"array {number}: " + " ".join(str(v) for v in array)
            for number, array in enumerate(self._arrays, start=1)
        ]

    def select(self, number: int, d: int) -> DHeap:
        """
        Build a heap of degree ``d`` from array ``number`` (1-based).

        The loaded array is copied, so selecting it again starts over.
        """
        if not 1 <= number <= len(self._arrays):
            raise ValueError(
                f"array number must be between 1 and {len(self._arrays)}, "
                f"got {number}"
            )
        self._heap = DHeap(self._arrays[number - 1], d, self._capacity)
        self._selected = number
        logger.info(f"selected array {number} with d={d}")
        return self._heap

    def insert(self, key: int) -> int:
        index = self.heap.insert(key)
        logger.info(f"inserted {key} at index {index}")
        return index

    def increase_key(self, i: int, key: int) -> int:
        index = self.heap.increase_key(i, key)
        logger.info(f"increased index {i} to {key}, now at index {index}")
        return index

    def extract_max(self) -> int:
        key = self.heap.extract_max()
        logger.info(f"extracted max {key}")
        return key

    def delete(self, index: int) -> int:
        key = self.heap.delete(index)
        logger.info(f"deleted {key} from index {index}")
        return key
