"""Configuration, security and dependency helpers."""
