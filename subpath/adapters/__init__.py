"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Input documents (JSON users, CSV queries)
- Output documents (JSON results)
- Path-finding engines (Dijkstra, BFS)
"""
