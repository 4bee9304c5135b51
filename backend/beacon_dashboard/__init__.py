"""Validator dashboard aggregation API."""
