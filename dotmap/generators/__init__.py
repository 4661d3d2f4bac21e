"""Generator package exports."""

from .to_css import generate_css
from .to_dot import generate_dot

__all__ = [
    "generate_css",
    "generate_dot",
]
