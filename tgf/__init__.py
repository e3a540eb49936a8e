"""Directed graphs in the trivial graph format."""
