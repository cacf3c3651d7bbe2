"""A top-down arcade shooter with a bow and polygon enemies, built on pygame."""

__version__ = "0.1.0"