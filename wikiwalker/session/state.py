"""
Session dataclasses for tracking a user's navigation through a site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from wikiwalker.config import MIN_TRAJECTORY_LENGTH


@dataclass
class ClickStep:
    """
    Records a single click in a session.

    Attributes:
        from_title: Article the user clicked from
        to_title: Article the user clicked to
        step_number: 1-indexed step number
        timestamp: When the click happened
    """

    from_title: str
    to_title: str
    step_number: int
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class NavigationSession:
    """
    Mutable state of one user's navigation.

    Attributes:
        start_title: Article the session started on
        current_title: Article the user is currently on
        path: Articles visited so far (including start and current)
        steps: Clicks recorded so far
    """

    start_title: str
    current_title: str = ""
    path: list[str] = field(default_factory=list)
    steps: list[ClickStep] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.current_title:
            self.current_title = self.start_title
        if not self.path:
            self.path = [self.start_title]

    @property
    def click_count(self) -> int:
        """Number of clicks made so far."""
        return len(self.path) - 1

    @property
    def trajectory(self) -> list[str]:
        """The visited articles in order, ready for SiteGraph.log_trajectory."""
        return list(self.path)

    @property
    def is_loggable(self) -> bool:
        """Whether the session holds at least one click."""
        return len(self.path) >= MIN_TRAJECTORY_LENGTH

    def record_click(self, to_title: str) -> ClickStep:
        """Record a click and update state."""
        step = ClickStep(
            from_title=self.current_title,
            to_title=to_title,
            step_number=len(self.steps) + 1,
        )
        self.steps.append(step)
        self.path.append(to_title)
        self.current_title = to_title
        return step
