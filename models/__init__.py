"""Data models and utility functions.

This package contains:
- types: Bridge, credential and device types
- directory: Device listing and name/ID resolution
- utils: Utility functions (display_width, similarity_score, etc.)
"""
