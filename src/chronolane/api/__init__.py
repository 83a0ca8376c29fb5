"""HTTP API for Chronolane."""
