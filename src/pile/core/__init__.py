"""Pile core logic."""
