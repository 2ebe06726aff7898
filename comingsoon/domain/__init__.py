"""Domain layer: value objects and exceptions. No framework imports."""
