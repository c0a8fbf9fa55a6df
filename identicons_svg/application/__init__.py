"""Application layer - services built on the pure domain."""
