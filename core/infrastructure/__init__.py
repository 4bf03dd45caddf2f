"""Infrastructure layer - logging and database configuration."""
