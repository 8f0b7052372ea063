"""Random phrase generator driven by categorized word dictionaries."""

__version__ = "0.3.0"
