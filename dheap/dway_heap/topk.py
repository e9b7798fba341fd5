from dheap.dway_heap.dway_heap import DHeap


def get_topk(heap: DHeap, k: int) -> list[int]:
    """
    Function to get the top-K keys from a heap.

    The K largest keys are returned in non-increasing order. The heap itself
    is left untouched: the keys are extracted from a copy.

    Parameters
    ----------
    heap : DHeap
        A DHeap object
    k : int
        The number of 'top-K' keys to retrieve.

    Returns
    -------
    list[int]
        The 'top-K' keys, fewer than K when the heap holds fewer keys.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = heap.copy()
    return [scratch.extract_max() for _ in range(min(k, len(scratch)))]
