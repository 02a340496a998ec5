"""Filesystem and template loading."""
