"""Car inventory manager with role-based login, a Tkinter interface and a plain-text store."""

__version__ = "1.0.0"
__all__ = ["__version__"]