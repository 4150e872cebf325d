"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from wikiwalker import SiteGraph


@pytest.fixture
def graph() -> SiteGraph:
    """Return an empty site graph."""
    return SiteGraph()


@pytest.fixture
def sample_articles() -> dict[str, list[str]]:
    """Return a small site of linked articles."""
    return {
        "Coffee": ["Espresso", "Caffeine", "Tea"],
        "Espresso": ["Coffee", "Italy", "Cappuccino"],
        "Cappuccino": ["Espresso", "Milk"],
        "Italy": ["Rome", "Espresso"],
        "Rome": ["Italy"],
        "Tea": ["Caffeine"],
        "Caffeine": [],
        "Island": ["Ocean"],
    }


@pytest.fixture
def site(graph: SiteGraph, sample_articles: dict[str, list[str]]) -> SiteGraph:
    """Return a site graph with the sample articles registered."""
    for name, links in sample_articles.items():
        graph.add_article(name, links)
    return graph
