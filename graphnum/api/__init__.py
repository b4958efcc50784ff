"""HTTP API for the numeric host functions."""
