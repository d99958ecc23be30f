"""Top-level package for the subscriber path resolver.

This package builds a directed graph from a user dataset (each user
pointing at their subscribers) and answers shortest-path queries over
it, reporting the intermediate users of one minimum-hop chain.
"""
