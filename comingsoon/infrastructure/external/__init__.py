"""External collaborators (early access endpoint, platform clock and link opener)."""
