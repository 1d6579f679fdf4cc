"""Make theme registries - definitions, views, and settings.

This package provides the plumbing layer of the Make theme:
- Definition registries (keyed definitions with required properties)
- View registry (view -> display predicate, current view resolution)
- Settings (defaults, sanitize callbacks, value resolution over a store)
"""

__version__ = "0.1.0"
