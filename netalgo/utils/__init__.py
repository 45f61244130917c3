"""Utility helpers for netalgo."""
