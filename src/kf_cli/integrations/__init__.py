"""Integrations with remote platforms."""
