"""Exercise bulk-import service for the fitness-tracking backend."""

__version__ = "0.1.0"
