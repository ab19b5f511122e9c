"""Infrastructure - logging and database lifecycle."""
