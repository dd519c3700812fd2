"""Lemon Rename command line interface."""
