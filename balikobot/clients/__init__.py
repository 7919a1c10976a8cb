"""Endpoint dispatcher and response shapers."""
