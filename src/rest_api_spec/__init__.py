"""Parse REST API descriptor documents into RestApiSpec models."""

__version__ = "0.1.0"
