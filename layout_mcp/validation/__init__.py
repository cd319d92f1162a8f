"""Argument validation models for layout tools."""
