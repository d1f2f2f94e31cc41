"""Graph layers and the logical domains that own them."""

from __future__ import annotations

from enum import Enum


class GraphLayer(Enum):
    """Layer a graph file belongs to."""

    CORE = "core"
    VIEW = "view"
    BRIDGE = "bridge"

    def label(self) -> str:
        """Human-readable layer name."""
        return self.name.capitalize()


class Domain(Enum):
    """Logical domain: View UI codegen and Core lowering are never mixed in one pass."""

    VIEW = "view"
    CORE = "core"
    BRIDGE = "bridge"

    def label(self) -> str:
        """Human-readable domain name."""
        return _DOMAIN_LABELS[self]

    def subtitle(self) -> str:
        """Short description of what the domain covers."""
        return _DOMAIN_SUBTITLES[self]

    @classmethod
    def from_layer(cls, layer: GraphLayer) -> "Domain":
        """Domain that owns graphs of the given layer."""
        return cls(GraphLayer(layer).value)

    def to_layer(self) -> GraphLayer:
        """Graph layer corresponding to this domain."""
        return GraphLayer(self.value)


_DOMAIN_LABELS = {
    Domain.VIEW: "View",
    Domain.CORE: "Core",
    Domain.BRIDGE: "Bridge",
}

_DOMAIN_SUBTITLES = {
    Domain.VIEW: "UI",
    Domain.CORE: "Logic",
    Domain.BRIDGE: "I/O",
}