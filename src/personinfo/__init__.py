"""Person enrichment service: predicted age, gender and nationality for a name."""

__version__ = "0.1.0"
