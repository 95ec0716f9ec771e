"""HTTP API for revlink."""
