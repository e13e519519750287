"""Command line interface for iterdiff."""
