"""Tool handler implementations, grouped by domain."""
