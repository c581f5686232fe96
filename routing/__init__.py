"""Shortest paths, route geometry and congestion-aware route selection."""
