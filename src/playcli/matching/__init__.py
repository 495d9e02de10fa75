"""Approximate matching of project names."""
