"""Infrastructure layer - adapters, database, logging."""
