"""Derive DOT-safe identifiers from display names."""

from __future__ import annotations

import re
from typing import Any

NODE_PREFIX = "r_"
CLUSTER_PREFIX = "cluster_"
GROUP_PREFIX = "group_"

_NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]+")


def normalize(name: Any) -> str:
    """Lower-case ``str(name)`` and collapse runs of non ``[a-z0-9]`` characters to ``_``."""

    text = "" if name is None else str(name)
    return _NON_ALNUM_PATTERN.sub("_", text.lower())


def node_id(name: Any) -> str:
    return NODE_PREFIX + normalize(name)


def container_id(name: Any, cluster: bool = True) -> str:
    # Graphviz only draws a box around subgraphs whose name starts with "cluster".
    prefix = CLUSTER_PREFIX if cluster else GROUP_PREFIX
    return prefix + normalize(name)
