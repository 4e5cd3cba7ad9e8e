"""Project request portal application package."""
