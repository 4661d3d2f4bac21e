"""Build directed graphs and compile them to Graphviz DOT plus an edge-highlighting stylesheet."""

from .attributes import RawMarkup, parse_attributes, raw, serialize_attribute_list, serialize_attributes
from .exceptions import DotmapError, GraphDocumentError, RenderError, StyleInjectionError
from .generators import generate_css, generate_dot
from .ids import container_id, node_id
from .loader import load_registry, load_registry_file
from .options import Options
from .registry import Edge, Node, Registry
from .render import GraphvizEngine, inject_stylesheet, render, render_sync

__all__ = [
    "DotmapError",
    "Edge",
    "GraphDocumentError",
    "GraphvizEngine",
    "Node",
    "Options",
    "RawMarkup",
    "Registry",
    "RenderError",
    "StyleInjectionError",
    "container_id",
    "generate_css",
    "generate_dot",
    "inject_stylesheet",
    "load_registry",
    "load_registry_file",
    "node_id",
    "parse_attributes",
    "raw",
    "render",
    "render_sync",
    "serialize_attribute_list",
    "serialize_attributes",
]
