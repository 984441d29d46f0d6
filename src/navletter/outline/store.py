"""Ordered paragraph store."""

from __future__ import annotations

from typing import Iterable, Iterator

from navletter.errors import ParagraphNotFoundError
from navletter.models.paragraph import ParagraphNode


class ParagraphStore:
    """Caller-owned, ordered list of paragraph nodes.

    The store is never empty: it starts with a single blank level-1 paragraph and a commit
    of an empty list is rejected.
    """

    def __init__(self, nodes: Iterable[ParagraphNode] | None = None) -> None:
        self._nodes: list[ParagraphNode] = list(nodes) if nodes is not None else []
        if not self._nodes:
            self._nodes = [ParagraphNode(id=1, level=1)]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ParagraphNode]:
        return iter(self._nodes)

    @property
    def nodes(self) -> list[ParagraphNode]:
        """A shallow copy of the nodes in document order."""

        return list(self._nodes)

    def index_of(self, paragraph_id: int) -> int:
        for i, node in enumerate(self._nodes):
            if node.id == paragraph_id:
                return i
        raise ParagraphNotFoundError(paragraph_id)

    def get(self, paragraph_id: int) -> ParagraphNode:
        return self._nodes[self.index_of(paragraph_id)]

    def next_id(self) -> int:
        return max(node.id for node in self._nodes) + 1

    def replace(self, nodes: list[ParagraphNode]) -> None:
        """Commit a new node list."""

        if not nodes:
            raise ValueError("paragraph store cannot be empty")
        self._nodes = list(nodes)
