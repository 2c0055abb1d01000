"""Code shared by every treatment protocol service: domain models and utilities."""
