"""Settings-level services built on the layout engine."""
