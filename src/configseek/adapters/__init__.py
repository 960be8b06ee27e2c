"""Adapters implementing configseek's ports."""
