"""Presentation shape tests (tree nodes, pick items)."""
