"""Signed JWT issuance."""
