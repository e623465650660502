"""Infrastructure layer — SQL column integration."""
