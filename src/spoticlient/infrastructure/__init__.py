"""Infrastructure layer: HTTP, error translation, observability."""
