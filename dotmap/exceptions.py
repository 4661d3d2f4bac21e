"""Exception types raised by dotmap."""

from __future__ import annotations


class DotmapError(Exception):
    """Base class for dotmap errors."""


class RenderError(RuntimeError, DotmapError):
    """Raised when a rendered document cannot be assembled."""


class StyleInjectionError(RenderError):
    """Raised when rendered markup has no opening tag to anchor the stylesheet."""


class GraphDocumentError(ValueError, DotmapError):
    """Raised when a JSON graph document is malformed."""
