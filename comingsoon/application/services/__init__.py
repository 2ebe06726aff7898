"""Application services: countdown engine and form validators."""
