from __future__ import annotations

import importlib

from webdoc.router import Router


def resolve_router(import_string: str) -> Router:
    """
    Resolve "module:attribute" to a Router. The attribute defaults to
    "router"; a zero-argument factory is called.

    Raises ValueError for an empty module part, ModuleNotFoundError /
    AttributeError for bad targets and TypeError when the result is not
    a Router.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not module_path:
        raise ValueError(f"{import_string!r} has no module part, expected module:attribute")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            raise TypeError(f"Factory {import_string!r} raised an error: {exc}") from exc

    if not isinstance(obj, Router):
        raise TypeError(f"{import_string!r} resolved to {type(obj).__name__}, not a webdoc Router")

    return obj
