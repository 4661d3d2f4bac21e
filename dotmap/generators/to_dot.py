"""Generate Graphviz DOT code from a registry."""

from __future__ import annotations

from typing import List, Mapping

from ..attributes import serialize_attribute_list, serialize_attributes
from ..ids import container_id, node_id
from ..registry import Node, Registry
from .utils import ROOT_ID, decorate_edge, decorate_node


def _settings(attributes: Mapping[str, object], indent: str) -> List[str]:
    lines: List[str] = []
    for key, value in attributes.items():
        text = serialize_attributes({key: value})
        if text:
            lines.append(f"{indent}{text}")
    return lines


def _defaults(kind: str, attributes: Mapping[str, object], indent: str) -> List[str]:
    attr_str = serialize_attribute_list(attributes)
    return [f"{indent}{kind}{attr_str};"] if attr_str else []


def _node_statement(node: Node, indent: str) -> str:
    return f"{indent}{node.node_id}{serialize_attribute_list(decorate_node(node))};"


def generate_dot(registry: Registry) -> str:
    options = registry.options

    lines: List[str] = ["digraph G {"]
    lines.extend(_settings({"id": ROOT_ID, "rankdir": options.rankdir, "label": options.name}, "  "))
    lines.extend(_settings(options.graph, "  "))
    lines.extend(_defaults("node", options.node, "  "))
    lines.extend(_defaults("edge", options.edge, "  "))
    lines.append("")

    for name, nodes in registry.groups.items():
        lines.append(f"  subgraph {container_id(name, options.cluster)} {{")
        lines.extend(_settings({"label": name, **options.group}, "    "))
        lines.extend(_defaults("node", options.group_node, "    "))
        lines.extend(_defaults("edge", options.group_edge, "    "))
        for node in nodes.values():
            lines.append(_node_statement(node, "    "))
        fragment = options.group_raw.get(name)
        if fragment:
            lines.append(fragment)
        lines.append("  }")
        lines.append("")

    for node in registry.external.values():
        lines.append(_node_statement(node, "  "))
    lines.append("")

    for edge in registry.edges:
        attr_str = serialize_attribute_list(decorate_edge(edge))
        lines.append(f"  {edge.from_id} -> {edge.to_id}{attr_str};")

    if options.raw:
        lines.append(options.raw)

    members = [node_id(name) for name in options.same_rank if node_id(name) in registry]
    if members:
        refs = " ".join(f"{identifier};" for identifier in members)
        lines.append(f"  {{ rank=same; {refs} }}")

    lines.append("}")
    return "\n".join(lines) + "\n"
