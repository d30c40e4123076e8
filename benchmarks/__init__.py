"""Performance benchmarks for labelgraph.

This package contains microbenchmarks for graph construction and path search.
"""
