"""Mesh file access."""
