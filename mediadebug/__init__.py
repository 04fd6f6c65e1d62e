"""Helpers for inspecting media probe output: codec flags, help listings, frame tables, JSON trees, progress and search state, and export commands."""

__version__ = "0.1.0"

__all__ = [
    "codecflags",
    "export",
    "frametable",
    "helpformat",
    "jsonescape",
    "jsontree",
    "progress",
    "searchrange",
]