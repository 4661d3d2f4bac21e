"""Decorations shared by the DOT and CSS generators.

The DOT generator tags every edge with ``id="f_<from> t_<to>"`` and the CSS
generator selects on those tokens with ``[id~=...]``, so both sides must build
them here.
"""

from __future__ import annotations

from typing import Dict

from ..attributes import Attributes
from ..registry import Edge, Node

ROOT_ID = "g"
FROM_TOKEN_PREFIX = "f_"
TO_TOKEN_PREFIX = "t_"


def from_token(identifier: str) -> str:
    return FROM_TOKEN_PREFIX + identifier


def to_token(identifier: str) -> str:
    return TO_TOKEN_PREFIX + identifier


def edge_dom_id(edge: Edge) -> str:
    return f"{from_token(edge.from_id)} {to_token(edge.to_id)}"


def edge_tooltip(edge: Edge) -> str:
    return f"{edge.from_name} -&gt; {edge.to_name}"


def select_href(identifier: str) -> str:
    """Return a ``javascript:`` link that marks the root graph element as selecting ``identifier``."""

    return (
        "javascript:(function(){"
        f"document.getElementById('{ROOT_ID}').setAttribute('class', 'graph {identifier}')"
        "})()"
    )


def decorate_node(node: Node) -> Attributes:
    attrs: Dict = dict(node.attributes)
    # Graphviz keeps edges between nodes sharing a "group" straight.
    if node.group is not None:
        attrs["group"] = node.group
    attrs["href"] = select_href(node.node_id)
    return attrs


def decorate_edge(edge: Edge) -> Attributes:
    attrs: Dict = dict(edge.attributes)
    attrs["edgetooltip"] = edge_tooltip(edge)
    attrs["id"] = edge_dom_id(edge)
    return attrs
