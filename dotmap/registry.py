"""In-memory registry of nodes, groups and edges."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .attributes import Attributes, coerce_attributes
from .ids import node_id
from .options import Options, resolve_options

logger = logging.getLogger(__name__)


@dataclass
class Node:
    name: str
    node_id: str
    attributes: Attributes = field(default_factory=dict)
    group: Optional[str] = None
    missing: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "id": self.node_id,
            "group": self.group,
            "missing": self.missing,
            "attributes": dict(self.attributes),
        }


@dataclass
class Edge:
    from_name: str
    from_id: str
    to_name: str
    to_id: str
    attributes: Attributes = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "from": self.from_name,
            "fromId": self.from_id,
            "to": self.to_name,
            "toId": self.to_id,
            "attributes": dict(self.attributes),
        }


class Registry:
    """Owns every node, group and edge of one diagram.

    Nodes live in exactly one partition, either a named group or the external
    set, and are also indexed by identifier. Edges may reference names that were
    never registered; :meth:`generate_missing_nodes` fills those in before
    compilation. Not safe for concurrent use.
    """

    def __init__(self, options: Any = None) -> None:
        self.options: Options = resolve_options(options)
        self._all: Dict[str, Node] = {}
        self._groups: Dict[str, Dict[str, Node]] = {}
        self._external: Dict[str, Node] = {}
        self._edges: List[Edge] = []

    @property
    def groups(self) -> Dict[str, Dict[str, Node]]:
        return {name: dict(nodes) for name, nodes in self._groups.items()}

    @property
    def external(self) -> Dict[str, Node]:
        return dict(self._external)

    @property
    def all_nodes(self) -> Dict[str, Node]:
        return dict(self._all)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def get(self, identifier: str) -> Optional[Node]:
        return self._all.get(identifier)

    def iter_nodes(self) -> Iterator[Node]:
        """Yield grouped nodes (groups in creation order) then external nodes."""

        for nodes in self._groups.values():
            yield from nodes.values()
        yield from self._external.values()

    def to_dict(self) -> Dict[str, object]:
        return {
            "groups": {
                name: [node.to_dict() for node in nodes.values()]
                for name, nodes in self._groups.items()
            },
            "external": [node.to_dict() for node in self._external.values()],
            "edges": [edge.to_dict() for edge in self._edges],
        }

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._all

    def __len__(self) -> int:
        return len(self._all)

    def node(self, name: str, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Node:
        return self._register(name, {**(attributes or {}), **kwargs})

    def _register(self, name: str, attributes: Mapping[str, Any], missing: bool = False) -> Node:
        attrs = coerce_attributes(attributes)
        group = attrs.pop("group", None) or None
        if missing:
            group = None
        identifier = node_id(name)
        if not attrs.get("label"):
            attrs["label"] = name
        attrs["id"] = identifier

        previous = self._all.get(identifier)
        if previous is not None:
            logger.debug("Node %r overwrites %r (both map to %s)", name, previous.name, identifier)
            if previous.group != group:
                self._partition(previous.group).pop(identifier, None)
                self._drop_empty_group(previous.group)

        node = Node(name=name, node_id=identifier, attributes=attrs, group=group, missing=missing)
        if group is not None:
            self._groups.setdefault(group, {})[identifier] = node
        else:
            self._external[identifier] = node
        self._all[identifier] = node
        return node

    def edge(
        self,
        from_name: str,
        to_name: str,
        attributes: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> Edge:
        edge = Edge(
            from_name=from_name,
            from_id=node_id(from_name),
            to_name=to_name,
            to_id=node_id(to_name),
            attributes=coerce_attributes({**(attributes or {}), **kwargs}),
        )
        self._edges.append(edge)
        return edge

    def generate_missing_nodes(self) -> List[Node]:
        """Register a placeholder for every edge endpoint with no node."""

        created: List[Node] = []
        for edge in self._edges:
            for name, identifier in ((edge.from_name, edge.from_id), (edge.to_name, edge.to_id)):
                if identifier in self._all:
                    continue
                created.append(self._register(name, self.options.missing_node, missing=True))
        if created:
            logger.debug("Generated %d missing node(s)", len(created))
        return created

    def prune_unconnected_nodes(self) -> List[str]:
        """Remove every node that is not an edge endpoint; return the removed ids."""

        connected = set()
        for edge in self._edges:
            connected.add(edge.from_id)
            connected.add(edge.to_id)

        removed: List[str] = []
        for identifier, node in list(self._all.items()):
            if identifier in connected:
                continue
            self._partition(node.group).pop(identifier, None)
            self._drop_empty_group(node.group)
            del self._all[identifier]
            removed.append(identifier)
        if removed:
            logger.debug("Pruned %d unconnected node(s)", len(removed))
        return removed

    def _partition(self, group: Optional[str]) -> Dict[str, Node]:
        if group is None:
            return self._external
        return self._groups.get(group, {})

    def _drop_empty_group(self, group: Optional[str]) -> None:
        if group is not None and not self._groups.get(group, True):
            del self._groups[group]
