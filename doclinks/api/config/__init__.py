"""Configuration for doclinks."""
