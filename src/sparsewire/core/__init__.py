"""Core types, errors and configuration."""
