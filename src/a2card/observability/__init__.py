"""Logging helpers for a2card."""
