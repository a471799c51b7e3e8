"""PEM decoding, key loading and bounded RSA encryption."""
