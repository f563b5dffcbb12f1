"""Mesh domain models."""
