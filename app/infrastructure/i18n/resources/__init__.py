"""English translations shipped with the application."""
