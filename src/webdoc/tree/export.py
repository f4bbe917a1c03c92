from __future__ import annotations

import json
from typing import Any

from webdoc.tree.model import Node, RouteTree


def node_to_dict(node: Node) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if node.methods:
        out["methods"] = {m: node.methods[m].dump() for m in sorted(node.methods)}
    if node.children:
        out["routes"] = {seg: node_to_dict(node.children[seg]) for seg in sorted(node.children)}
    return out


def tree_to_dict(tree: RouteTree) -> dict[str, Any]:
    """
    Introspection form of the tree:

      {"methods": {...root docs...},
       "routes": {"/users": {"routes": {"/:id": {"methods": {"GET": {...}}}}}}}

    Empty "routes"/"methods" and empty doc fields are omitted.
    """
    return node_to_dict(tree.root)


def tree_to_json(tree: RouteTree, indent: int | None = 2) -> str:
    return json.dumps(tree_to_dict(tree), indent=indent, default=str)


def endpoint_rows(tree: RouteTree) -> list[dict[str, Any]]:
    rows = []
    for method, path, doc in tree.endpoints():
        rows.append(
            {
                "method": method,
                "path": path,
                "title": doc.title or "",
                "url_params": dict(doc.url_params),
            }
        )
    return rows
