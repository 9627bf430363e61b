"""Domain layer: immutable mesh, segment and connection records."""
