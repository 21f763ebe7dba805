"""HTTP surface of the transcript server."""
