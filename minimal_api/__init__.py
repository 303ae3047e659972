"""Vehicle and administrator management API."""
