"""Definition registries - keyed definitions with required properties.

Both the view registry and the settings types extend the base registry
defined here.
"""
