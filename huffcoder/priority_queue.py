from heapq import heappush, heappop
from itertools import count

from .errors import EmptyQueueError


class PriorityQueue:
    """
    Min-heap of tree nodes ordered by frequency.

    Nodes of equal frequency come out in the order they were inserted, so
    the tree built from the queue is the same on every run.
    """

    def __init__(self):
        self._heap = []
        self._sequence = count()

    def insert(self, node) -> None:
        """
        Adds a node to the queue.

        Parameters:
        node (Leaf | Internal): Any object with a ``frequency`` attribute.
        """
        heappush(self._heap, (node.frequency, next(self._sequence), node))

    def peek_min(self):
        """
        Returns the lowest-frequency node without removing it.

        Raises:
        EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("peek_min() called on an empty queue")
        return self._heap[0][2]

    def extract_min(self):
        """
        Removes and returns the lowest-frequency node.

        Raises:
        EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("extract_min() called on an empty queue")
        return heappop(self._heap)[2]

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
