"""Month-view order calendar."""

__version__ = "0.1.0"
