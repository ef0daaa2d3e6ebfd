"""Utility helpers for routefinder."""
