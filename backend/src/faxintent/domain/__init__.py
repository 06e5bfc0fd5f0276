"""Domain layer: framework-free decision logic."""
