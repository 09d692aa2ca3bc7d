"""HTTP service for the rendered calendar."""
