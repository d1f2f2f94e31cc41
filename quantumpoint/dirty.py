"""Tracking of nodes that need re-lowering or re-validation."""

from __future__ import annotations

from typing import Iterable, List

_MAX_REVISION = 2**64 - 1


class DirtyTracker:
    """Dirty node set plus a structure flag and a saturating revision counter."""

    def __init__(self) -> None:
        self._nodes: set[str] = set()
        self._revision = 0
        self._structure_dirty = False

    def _bump(self) -> None:
        self._revision = min(self._revision + 1, _MAX_REVISION)

    def mark_node(self, node_id: str) -> None:
        self._nodes.add(node_id)
        self._bump()

    def mark_structure(self) -> None:
        self._structure_dirty = True
        self._bump()

    def mark_all(self, node_ids: Iterable[str]) -> None:
        self._nodes.update(node_ids)
        self._bump()

    def is_dirty(self, node_id: str) -> bool:
        return self._structure_dirty or node_id in self._nodes

    def any_dirty(self) -> bool:
        return self._structure_dirty or bool(self._nodes)

    def structure_dirty(self) -> bool:
        return self._structure_dirty

    def drain_dirty_nodes(self) -> List[str]:
        """Return and forget the dirty node ids; also resets the structure flag."""
        self._structure_dirty = False
        drained = list(self._nodes)
        self._nodes.clear()
        return drained

    def revision(self) -> int:
        return self._revision

    def clear(self) -> None:
        """Forget dirty state without touching the revision."""
        self._nodes.clear()
        self._structure_dirty = False