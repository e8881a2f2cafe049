"""AI-assisted blog drafting service."""

__version__ = "0.1.0"
