"""API v1 endpoint modules (one router each)."""
