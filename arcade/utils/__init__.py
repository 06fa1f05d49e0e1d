"""Utility helpers for the arcade asset server."""
