"""A top-down action game with a knight, props and roaming enemies."""

__version__ = "0.1.0"