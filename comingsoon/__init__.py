"""IAIAIN coming-soon service: launch countdown and early access sign-up."""

__version__ = "1.0.0"
