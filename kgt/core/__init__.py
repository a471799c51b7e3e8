"""Errors and settings shared across the package."""
