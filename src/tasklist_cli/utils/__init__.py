"""Utility helpers for Tasklist CLI."""
