"""Shared process utilities."""
