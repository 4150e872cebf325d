#!/usr/bin/env python3
"""
WikiWalker CLI - Explore clickthrough predictions on a sample site.

Builds a small in-memory site, replays a handful of recorded sessions,
then reports reachability, clickthroughs and the most likely trajectory.

Usage:
    python scripts/walk.py --start "Coffee"
    python scripts/walk.py --start "Coffee" --target "Italy" -k 4
    python scripts/walk.py --start "Tea" --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wikiwalker import NavigationSession, SiteGraph  # noqa: E402
from wikiwalker.config import DEFAULT_TRAJECTORY_STEPS, LOG_LEVEL  # noqa: E402

# =============================================================================
# SAMPLE SITE
# =============================================================================

SAMPLE_ARTICLES = {
    "Coffee": ["Espresso", "Caffeine", "Tea", "Coffee"],
    "Espresso": ["Coffee", "Italy", "Cappuccino"],
    "Cappuccino": ["Espresso", "Milk", "Italy"],
    "Italy": ["Rome", "Espresso", "Pizza"],
    "Rome": ["Italy"],
    "Tea": ["Caffeine", "China", "Coffee"],
    "Caffeine": ["Coffee", "Tea"],
    "Pizza": ["Italy", "Cheese"],
    "Milk": [],
}

SAMPLE_SESSIONS = [
    ["Coffee", "Espresso", "Italy", "Rome"],
    ["Coffee", "Espresso", "Cappuccino", "Milk"],
    ["Coffee", "Espresso", "Italy", "Pizza", "Cheese"],
    ["Tea", "Caffeine", "Coffee", "Espresso"],
    ["Tea", "China"],
    ["Espresso", "Italy", "Rome", "Italy", "Pizza"],
]


def build_sample_graph() -> SiteGraph:
    """Register the sample site and replay its sessions."""
    graph = SiteGraph()
    for name, links in SAMPLE_ARTICLES.items():
        graph.add_article(name, links)

    for clicks in SAMPLE_SESSIONS:
        session = NavigationSession(start_title=clicks[0])
        for title in clicks[1:]:
            session.record_click(title)
        graph.log_session(session)

    return graph


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Explore clickthrough predictions on a sample site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Article to start from",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Article to check reachability and clickthroughs against",
    )
    parser.add_argument(
        "-k",
        "--steps",
        type=int,
        default=DEFAULT_TRAJECTORY_STEPS,
        help=f"Maximum clicks to predict (default: {DEFAULT_TRAJECTORY_STEPS})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    graph = build_sample_graph()
    stats = graph.stats()

    print("\n" + "=" * 60)
    print("WikiWalker")
    print("=" * 60)
    print(f"  Articles:      {stats['articles']}")
    print(f"  Links:         {stats['links']}")
    print(f"  Clickthroughs: {stats['clickthroughs']}")
    print("=" * 60 + "\n")

    try:
        if args.target:
            reachable = graph.has_path(args.start, args.target)
            print(f"Path from '{args.start}' to '{args.target}': {'yes' if reachable else 'no'}")
            if reachable:
                count = graph.clickthroughs(args.start, args.target)
                if count < 0:
                    print("  No direct link to count clickthroughs on")
                else:
                    print(f"  Direct clickthroughs: {count}")
            print()

        trajectory = graph.most_likely_trajectory(args.start, args.steps)
    except (KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Most likely trajectory from '{args.start}' (up to {args.steps} clicks):")
    if not trajectory:
        print("  (no recorded clicks to follow)")
    for i, title in enumerate(trajectory, start=1):
        print(f"  {i}. {title}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
