"""Serial number list manager (Tkinter desktop + NiceGUI web)."""

__version__ = "0.1.0"
