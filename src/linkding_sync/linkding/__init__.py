"""Linkding REST API client."""
