"""Production microservice for the fast food order lifecycle."""

__version__ = "1.0.0"
