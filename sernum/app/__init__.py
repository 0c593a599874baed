"""Application composition layer for the Tkinter GUI.

Controllers in this package wire views, view models, adapters, and use cases
into a runnable desktop workflow without placing business logic in views.
"""
