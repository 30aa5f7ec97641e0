"""Utility helpers for chart parsing."""
