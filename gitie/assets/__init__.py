"""Bundled configuration and prompt templates."""
