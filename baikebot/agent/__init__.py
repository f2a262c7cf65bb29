"""Agent-facing tools and runtime helpers."""
