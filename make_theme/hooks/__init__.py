"""Hook registry - named filter and action extension points.

Filters transform a value; actions announce that something happened. The
registry is passed explicitly to every component that exposes hooks.
"""
