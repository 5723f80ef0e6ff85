"""Endpoint descriptor, JSON helpers and profile extraction."""
