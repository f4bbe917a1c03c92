from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from webdoc.config import get_settings
from webdoc.domain.models import HTTP_METHODS, DocEntry
from webdoc.paths.segmenter import ROOT, is_root, segments


@dataclass
class Node:
    children: dict[str, Node] = field(default_factory=dict)
    methods: dict[str, DocEntry] = field(default_factory=dict)

    def find(self, segs: list[str]) -> Optional[Node]:
        node: Optional[Node] = self
        for seg in segs:
            if node is None:
                return None
            node = node.children.get(seg)
        return node

    def walk(self, prefix: str = "") -> Iterator[tuple[str, Node]]:
        # depth-first, sorted by segment so output is stable
        for seg in sorted(self.children):
            node = self.children[seg]
            path = prefix + seg
            yield path, node
            yield from node.walk(path)


def _method_order(method: str) -> tuple[int, str]:
    try:
        return (HTTP_METHODS.index(method), method)
    except ValueError:
        return (len(HTTP_METHODS), method)


@dataclass
class RouteTree:
    """
    Documentation map mirroring the path-segment structure of a router.

    The root node stands for "/"; everything else hangs off root.children.
    Built during setup by webdoc.tree.builder, read-only afterwards.
    """

    root: Node = field(default_factory=Node)
    default_param_type: str = field(
        default_factory=lambda: get_settings().DEFAULT_PARAM_TYPE, compare=False
    )

    def register(self, method: str, pattern: str, doc: Optional[DocEntry] = None) -> Node:
        from webdoc.tree import builder

        return builder.register(self, method, pattern, doc)

    def mount(self, pattern: str, child: RouteTree) -> Node:
        from webdoc.tree import builder

        return builder.mount(self, pattern, child)

    def lookup(self, pattern: str) -> Optional[Node]:
        segs = segments(pattern)
        if is_root(segs):
            return self.root
        return self.root.find(segs)

    def endpoints(self) -> list[tuple[str, str, DocEntry]]:
        """(METHOD, path, doc) rows; root first, then depth-first by segment."""
        rows: list[tuple[str, str, DocEntry]] = []
        nodes = [(ROOT, self.root)] + list(self.root.walk())
        for path, node in nodes:
            for method in sorted(node.methods, key=_method_order):
                rows.append((method, path, node.methods[method]))
        return rows
