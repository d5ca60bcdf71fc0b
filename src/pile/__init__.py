"""Pile: find and delete large old files."""
