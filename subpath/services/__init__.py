"""Services layer - Application orchestration.

Available services:
- ShortestPathService: Builds the graph and answers path queries
"""

from .query_driver import ShortestPathService, number_queries

__all__ = ["ShortestPathService", "number_queries"]
