"""ViewModel package for UI state and command surfaces.

Call context:
    ``sernum/app/main.py`` and ``sernum/web_ui/runtime.py`` import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and use cases only. I/O
    adapters are injected by the composition roots.
"""
