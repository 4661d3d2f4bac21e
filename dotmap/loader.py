"""Build a registry from a JSON graph document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Union

from .exceptions import GraphDocumentError
from .registry import Registry


def _load_node(registry: Registry, index: int, entry: Any) -> None:
    if isinstance(entry, str) and entry:
        registry.node(entry)
        return
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str) or not entry["name"]:
        raise GraphDocumentError(f"nodes[{index}] must be a name or an object with a string 'name'")
    group = entry.get("group")
    if group is not None and not isinstance(group, str):
        raise GraphDocumentError(f"nodes[{index}] group must be a string")
    attributes = entry.get("attributes")
    if attributes is not None and not isinstance(attributes, dict):
        raise GraphDocumentError(f"nodes[{index}] attributes must be an object")
    attributes = dict(attributes or {})
    if group:
        attributes["group"] = group
    registry.node(entry["name"], attributes)


def _load_edge(registry: Registry, index: int, entry: Any) -> None:
    if isinstance(entry, (list, tuple)) and len(entry) in (2, 3):
        source, target = entry[0], entry[1]
        attributes = entry[2] if len(entry) == 3 else None
    elif isinstance(entry, dict):
        source, target = entry.get("from"), entry.get("to")
        attributes = entry.get("attributes")
    else:
        raise GraphDocumentError(f"edges[{index}] must be an object or a [from, to] pair")
    if not source or not target:
        raise GraphDocumentError(f"edges[{index}] is missing 'from' or 'to'")
    if not isinstance(source, str) or not isinstance(target, str):
        raise GraphDocumentError(f"edges[{index}] endpoints must be strings")
    if attributes is not None and not isinstance(attributes, dict):
        raise GraphDocumentError(f"edges[{index}] attributes must be an object")
    registry.edge(source, target, attributes)


def _section(document: Mapping[str, Any], key: str, kind: type, description: str, default: Any) -> Any:
    value = document.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise GraphDocumentError(f"'{key}' must be {description}")
    return value


def load_registry(document: Mapping[str, Any]) -> Registry:
    """
    Create a registry from a graph document.

    Document shape::

        {
          "options": {"name": "Services", "sameRank": ["A", "B"]},
          "nodes": ["A", {"name": "B", "group": "Tier 1", "attributes": {"color": "red"}}],
          "edges": [{"from": "A", "to": "B", "attributes": {"label": "calls"}}, ["B", "C"]]
        }
    """

    if not isinstance(document, Mapping):
        raise GraphDocumentError("Graph document must be a JSON object")
    options = _section(document, "options", Mapping, "an object", {})

    registry = Registry(options)
    nodes: List[Any] = _section(document, "nodes", list, "a list", [])
    edges: List[Any] = _section(document, "edges", list, "a list", [])
    for index, entry in enumerate(nodes):
        _load_node(registry, index, entry)
    for index, entry in enumerate(edges):
        _load_edge(registry, index, entry)
    return registry


def load_registry_file(path: Union[str, Path]) -> Registry:
    with Path(path).open("r", encoding="utf-8") as handle:
        try:
            document = json.load(handle)
        except json.JSONDecodeError as exc:
            raise GraphDocumentError(f"{path}: {exc}") from exc
    return load_registry(document)
