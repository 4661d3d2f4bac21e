"""Registry configuration with built-in defaults."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from .attributes import Attributes, coerce_attributes

logger = logging.getLogger(__name__)

# camelCase spellings accepted for the options documents written by hand.
_KEY_ALIASES = {
    "groupNode": "group_node",
    "groupEdge": "group_edge",
    "missingNode": "missing_node",
    "fromStyle": "from_style",
    "toStyle": "to_style",
    "sameRank": "same_rank",
    "groupRaw": "group_raw",
}

_ATTRIBUTE_KEYS = ("graph", "group", "node", "edge", "group_node", "group_edge", "missing_node")


@dataclass(frozen=True)
class Options:
    name: Optional[str] = None
    rankdir: str = "LR"
    cluster: bool = True
    graph: Attributes = field(default_factory=dict)
    group: Attributes = field(default_factory=lambda: {"color": "blue"})
    node: Attributes = field(default_factory=lambda: {"shape": "box3d"})
    edge: Attributes = field(default_factory=lambda: {"fontsize": 7, "color": "black"})
    group_node: Attributes = field(default_factory=lambda: {"shape": "rectangle"})
    group_edge: Attributes = field(default_factory=lambda: {"color": "black"})
    missing_node: Attributes = field(default_factory=lambda: {"shape": "rectangle"})
    same_rank: List[str] = field(default_factory=list)
    from_style: str = "stroke: red; stroke-width: 4px;"
    to_style: str = "stroke: green; stroke-width: 4px;"
    css: str = ".node { cursor: pointer; }"
    raw: Optional[str] = None
    group_raw: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]] = None) -> "Options":
        """Build options from ``mapping``, overriding defaults key by key.

        Unknown keys are ignored. A ``None`` attribute mapping disables that
        default declaration the same way an empty mapping does.
        """

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (mapping or {}).items():
            key = _KEY_ALIASES.get(key, key)
            if key not in known:
                logger.debug("Ignoring unknown option %r", key)
                continue
            if key in _ATTRIBUTE_KEYS:
                value = coerce_attributes(value)
            elif key == "same_rank":
                value = list(value or [])
            elif key == "group_raw":
                value = dict(value or {})
            else:
                value = copy.copy(value)
            values[key] = value
        return cls(**values)


def resolve_options(options: Any) -> Options:
    if isinstance(options, Options):
        return options
    return Options.from_mapping(options)
