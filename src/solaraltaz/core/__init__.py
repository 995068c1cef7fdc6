"""Domain models, configuration and debug collectors."""
