"""CLI module for baikebot."""
