"""Output schemas and path helpers."""
