"""API models for the reference service."""
