"""
Graph module.

Provides the site graph and its algorithms:
- Reachability: BFS over registered links
- Trajectory logging: clickthrough counting
- Prediction: greedy most likely trajectory
"""

from wikiwalker.graph.site_graph import SiteGraph

__all__ = ["SiteGraph"]
