"""Generate the edge-highlighting stylesheet from a registry."""

from __future__ import annotations

from typing import List

from ..registry import Registry
from .utils import ROOT_ID, from_token, to_token


def _selector(identifier: str, token: str) -> str:
    return f"#{ROOT_ID}.{identifier} [id~={token}] path"


def generate_css(registry: Registry) -> str:
    options = registry.options

    froms: List[str] = []
    tos: List[str] = []
    for node in registry.iter_nodes():
        froms.append(_selector(node.node_id, from_token(node.node_id)))
        tos.append(_selector(node.node_id, to_token(node.node_id)))

    return (
        ",\n".join(froms) + "{" + options.from_style + "}\n\n"
        + ",\n".join(tos) + "{" + options.to_style + "}\n\n"
        + options.css + "\n"
    )
