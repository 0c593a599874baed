"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (entry stores, export
    sinks, settings storage) used by use cases.

Dependencies:
    Individual submodules depend on filesystem APIs, ``subprocess`` for the
    platform opener, and domain protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests (for
    in-memory doubles and filesystem behavior verification).
"""
