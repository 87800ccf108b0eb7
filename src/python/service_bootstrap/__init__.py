"""Bootstrap utilities for the backend service: database engine and secrets."""
