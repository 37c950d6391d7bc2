"""Logging helpers for the finance dashboard."""
