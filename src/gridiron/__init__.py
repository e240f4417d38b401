"""Gridiron: NFL fantasy squad and lineup builder."""

__version__ = "0.1.0"
