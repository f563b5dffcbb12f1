"""Shortest-path search, route reconstruction and cost calculation."""
