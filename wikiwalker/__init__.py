"""
WikiWalker.

An in-memory site graph of linked articles that tracks how users click
through it, answering reachability questions and predicting the most
likely trajectory from any article.
"""

from wikiwalker.graph import SiteGraph
from wikiwalker.session import ClickStep, NavigationSession

__version__ = "0.1.0"

__all__ = ["SiteGraph", "NavigationSession", "ClickStep"]
