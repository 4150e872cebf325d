"""
Session module.

Captures user navigation so it can be logged against a site graph:
- NavigationSession: Tracks the clicks of one user session
- ClickStep: Records a single click
"""

from wikiwalker.session.state import ClickStep, NavigationSession

__all__ = [
    "NavigationSession",
    "ClickStep",
]
