"""Compatibility reporting - advisory notices for misuse and deprecated hooks."""
