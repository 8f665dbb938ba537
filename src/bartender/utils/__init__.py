"""Utility helpers for bartender."""
