"""Multi-user todo list service: bearer-token authentication and owner-scoped todos."""

__version__ = "0.1.0"
