"""Settings, runtime registry, and dependency wiring."""
