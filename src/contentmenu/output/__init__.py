"""Output layer — ServiceResult formatting for the CLI."""
