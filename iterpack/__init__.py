"""Implementation packages for iterdiff."""

__version__ = "0.1.0"
