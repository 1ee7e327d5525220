"""Infrastructure layer - adapters, event bus, clock and logging."""
