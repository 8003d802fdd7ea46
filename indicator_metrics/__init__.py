"""Before/after indicator metrics engine for AI-implementation dashboards."""

__version__ = "0.1.0"
