"""Use-case layer for orchestrating list workflows.

Each module coordinates domain objects and ports without performing I/O
directly, preserving MVVM + Hexagonal boundaries.
"""
