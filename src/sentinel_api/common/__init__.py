"""Shared building blocks for the repository layer."""
