"""
SiteGraph: an in-memory link graph that counts clickthroughs.

Usage:
    from wikiwalker.graph import SiteGraph

    graph = SiteGraph()
    graph.add_article("Coffee", ["Espresso", "Caffeine"])
    graph.add_article("Espresso", ["Coffee", "Italy"])
    graph.log_trajectory(["Coffee", "Espresso", "Italy"])

    graph.has_path("Coffee", "Italy")            # True
    graph.clickthroughs("Coffee", "Espresso")    # 1
    graph.most_likely_trajectory("Coffee", 3)    # ["Espresso", "Italy"]
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from typing import TYPE_CHECKING

from wikiwalker.config import MIN_TRAJECTORY_LENGTH, NO_DIRECT_CLICKTHROUGHS

if TYPE_CHECKING:
    from wikiwalker.session.state import NavigationSession

logger = logging.getLogger(__name__)


class SiteGraph:
    """
    Directed graph of articles whose edges carry clickthrough counts.

    Each registered article maps to its outgoing links, and each link to the
    number of times users were observed clicking it. Link mappings are stored
    in ascending name order, which is the order every scan uses.

    An article that only appears as a link target has no entry of its own:
    it can be reached but leads nowhere.

    Not safe for concurrent use; callers sharing an instance across threads
    must serialize access.
    """

    def __init__(self) -> None:
        self._links: dict[str, dict[str, int]] = {}

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, name: object) -> bool:
        return name in self._links

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(articles={len(self._links)})"

    # =========================================================================
    # Registration
    # =========================================================================

    def add_article(self, name: str, links: Sequence[str]) -> None:
        """
        Register an article and the articles it links to.

        Duplicate links collapse to one and links back to the article itself
        are dropped. Re-registering an article replaces its links and resets
        all of its clickthrough counts to 0.

        Args:
            name: Title of the article
            links: Titles of the articles linked from the page
        """
        distinct = sorted(set(links) - {name})
        if name in self._links:
            logger.debug(f"Re-registering '{name}', discarding its clickthrough counts")
        self._links[name] = dict.fromkeys(distinct, 0)
        logger.debug(f"Registered '{name}' with {len(distinct)} links")

    # =========================================================================
    # Reachability
    # =========================================================================

    def has_path(self, src: str, dest: str) -> bool:
        """
        Check whether some sequence of links leads from src to dest.

        Breadth-first search over registered links. An article is its own
        destination, so has_path(x, x) is True even for unregistered x.
        """
        frontier = deque([src])
        visited: set[str] = set()

        while frontier:
            current = frontier.popleft()

            if current == dest:
                return True
            if current in visited:
                continue
            visited.add(current)

            # Unregistered articles are dead ends
            for neighbor in self._links.get(current, ()):
                if neighbor not in visited:
                    frontier.append(neighbor)

        logger.debug(f"No path from '{src}' to '{dest}' ({len(visited)} articles searched)")
        return False

    # =========================================================================
    # Clickthroughs
    # =========================================================================

    def log_trajectory(self, trajectory: Sequence[str]) -> None:
        """
        Increment the clickthrough count of every link along a trajectory.

        A trajectory of ["A", "B", "C"] increments A->B and B->C by one.

        Args:
            trajectory: Articles in the order the user visited them

        Raises:
            ValueError: If the trajectory has fewer than 2 articles
            KeyError: If an article is unregistered or a link does not exist.
                No counts are changed in that case.
        """
        if len(trajectory) < MIN_TRAJECTORY_LENGTH:
            raise ValueError(
                f"Trajectory must contain at least {MIN_TRAJECTORY_LENGTH} articles, "
                f"got {len(trajectory)}"
            )

        clicks = list(zip(trajectory, trajectory[1:]))

        # Validate every click first so a bad trajectory leaves counts intact
        for src, dest in clicks:
            if src not in self._links:
                raise KeyError(f"Article '{src}' is not registered")
            if dest not in self._links[src]:
                raise KeyError(f"Article '{src}' has no link to '{dest}'")

        for src, dest in clicks:
            self._links[src][dest] += 1

        logger.debug(f"Logged trajectory of {len(clicks)} clicks: {' -> '.join(trajectory)}")

    def log_session(self, session: NavigationSession) -> bool:
        """
        Log the clicks of a navigation session.

        Returns:
            True if the session was logged, False if it had no clicks
        """
        if not session.is_loggable:
            logger.debug(f"Skipping session on '{session.start_title}' with no clicks")
            return False
        self.log_trajectory(session.trajectory)
        return True

    def clickthroughs(self, src: str, dest: str) -> int:
        """
        Return how many times the link from src to dest was clicked.

        Returns:
            The recorded count (possibly 0) if dest is linked directly from
            src, or -1 if src == dest or dest is only reachable indirectly.

        Raises:
            ValueError: If dest cannot be reached from src
        """
        if src == dest:
            return NO_DIRECT_CLICKTHROUGHS
        if not self.has_path(src, dest):
            raise ValueError(f"No path from '{src}' to '{dest}'")
        return self._links[src].get(dest, NO_DIRECT_CLICKTHROUGHS)

    # =========================================================================
    # Prediction
    # =========================================================================

    def most_likely_trajectory(self, src: str, k: int) -> list[str]:
        """
        Predict the most likely sequence of up to k clicks starting at src.

        At each step the most-clicked link is followed. Ties go to the title
        earliest in ascending order. Links with no clicks are never followed,
        so the walk ends early on an article whose links were never clicked
        or that has no links. Revisits and cycles are allowed.

        Args:
            src: Starting article (not included in the output)
            k: Maximum number of clicks to predict

        Returns:
            The predicted articles in click order, at most k of them

        Raises:
            KeyError: If src is not registered
        """
        if src not in self._links:
            raise KeyError(f"Article '{src}' is not registered")

        trajectory: list[str] = []
        current = src

        while len(trajectory) < k:
            next_title = self._most_clicked_link(current)
            if next_title is None:
                logger.debug(f"Trajectory from '{src}' stalled at '{current}'")
                break
            trajectory.append(next_title)
            current = next_title

        logger.debug(f"Most likely trajectory from '{src}' (k={k}): {trajectory}")
        return trajectory

    def _most_clicked_link(self, title: str) -> str | None:
        """Return the link with the most clicks (earliest title wins ties), if any was clicked."""
        best_title = None
        best_count = 0
        for link, count in self._links.get(title, {}).items():
            if count > best_count:
                best_title = link
                best_count = count
        return best_title

    # =========================================================================
    # Accessors
    # =========================================================================

    def has_article(self, name: str) -> bool:
        """Check if an article is registered with its own links."""
        return name in self._links

    def get_links(self, name: str) -> list[str]:
        """Get outgoing links of an article in ascending order."""
        return list(self._links.get(name, ()))

    def get_clickthrough_counts(self, name: str) -> dict[str, int]:
        """Get a copy of an article's link -> clickthrough count mapping."""
        return dict(self._links.get(name, {}))

    def article_count(self) -> int:
        """Number of registered articles."""
        return len(self._links)

    def stats(self) -> dict:
        """Get statistics about the graph."""
        return {
            "articles": len(self._links),
            "links": sum(len(links) for links in self._links.values()),
            "clickthroughs": sum(sum(links.values()) for links in self._links.values()),
            "terminal_articles": sum(1 for links in self._links.values() if not links),
        }
