"""Squadro move search: rules engine, heuristics and minimax."""

__version__ = "0.1.0"
