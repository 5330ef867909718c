"""Output schemas for API commands."""
