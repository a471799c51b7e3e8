"""Certificate document resolution."""
