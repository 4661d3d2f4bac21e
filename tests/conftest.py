"""Pytest configuration and fixtures."""

import pytest

from dotmap import Registry


class FakeEngine:
    """Stand-in for Graphviz that records the DOT source it was given."""

    def __init__(self, svg: str = '<?xml version="1.0"?>\n<svg width="8pt" height="8pt">\n<g id="g"></g>\n</svg>\n'):
        self.svg = svg
        self.sources = []

    def layout(self, dot_source: str) -> str:
        self.sources.append(dot_source)
        return self.svg


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def service_registry() -> Registry:
    """Two services, one of them grouped, joined by a labelled edge."""
    registry = Registry()
    registry.node("Service A")
    registry.node("Service B", {"group": "Tier 1"})
    registry.edge("Service A", "Service B", {"label": "calls"})
    return registry
