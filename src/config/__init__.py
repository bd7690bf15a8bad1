"""Runtime configuration (environment-backed constants)."""
