"""Render a registry to SVG with the highlighting stylesheet embedded."""

from __future__ import annotations

import asyncio
import inspect
import logging
import re
import time
from typing import Optional, Protocol

import graphviz

from .exceptions import StyleInjectionError
from .generators import generate_css, generate_dot
from .registry import Registry

logger = logging.getLogger(__name__)

_SVG_OPEN_PATTERN = re.compile(r"<svg[^>]*>")


class LayoutEngine(Protocol):
    def layout(self, dot_source: str) -> str:
        ...


class GraphvizEngine:
    """Lay out DOT source with the Graphviz executables via the ``graphviz`` package.

    Raises ``graphviz.ExecutableNotFound`` when the ``dot`` binary is not on
    PATH and ``subprocess.CalledProcessError`` when Graphviz rejects the source.
    """

    def __init__(self, engine: str = "dot", format: str = "svg") -> None:
        self.engine = engine
        self.format = format

    def layout(self, dot_source: str) -> str:
        source = graphviz.Source(dot_source, engine=self.engine)
        return source.pipe(format=self.format, encoding="utf-8")


def style_block(css: str) -> str:
    return '<defs><style type="text/css"><![CDATA[\n' + css + "\n]]></style></defs>\n"


def inject_stylesheet(svg: str, css: str) -> str:
    """Insert ``css`` as an embedded style element right after the first ``<svg>`` tag."""

    match = _SVG_OPEN_PATTERN.search(svg)
    if not match:
        raise StyleInjectionError("Rendered document has no <svg> opening tag to anchor the stylesheet")
    return svg[:match.end()] + style_block(css) + svg[match.end():]


async def _layout(engine: LayoutEngine, dot_source: str) -> str:
    if inspect.iscoroutinefunction(engine.layout):
        return await engine.layout(dot_source)
    return await asyncio.to_thread(engine.layout, dot_source)


async def render(
    registry: Registry,
    engine: Optional[LayoutEngine] = None,
    synthesize: bool = True,
) -> str:
    """Lay out the DOT document and embed the stylesheet.

    Args:
        registry: Graph to render.
        engine: Layout engine, defaults to :class:`GraphvizEngine`.
        synthesize: Add placeholder nodes for undeclared edge endpoints to
            ``registry`` in place before compiling.

    Returns:
        SVG markup with the highlighting stylesheet embedded.
    """

    engine = engine or GraphvizEngine()
    if synthesize:
        registry.generate_missing_nodes()
    dot_source = generate_dot(registry)

    started = time.perf_counter()
    svg = await _layout(engine, dot_source)
    logger.info(
        "Laid out %d node(s), %d edge(s) in %.3fs",
        len(registry),
        len(registry.edges),
        time.perf_counter() - started,
    )

    return inject_stylesheet(svg, generate_css(registry))


def render_sync(
    registry: Registry,
    engine: Optional[LayoutEngine] = None,
    synthesize: bool = True,
) -> str:
    return asyncio.run(render(registry, engine, synthesize))
