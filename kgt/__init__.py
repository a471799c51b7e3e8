"""Credential and token issuance for Knox Guard device management."""

__version__ = "0.1.0"
