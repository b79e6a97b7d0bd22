"""Configuration — TOML discovery, unified settings, and logging setup."""
