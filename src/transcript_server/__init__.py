"""HTTP API returning YouTube caption tracks as plain text or timestamped segments."""

__version__ = "1.0.0"
