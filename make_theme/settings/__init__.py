"""Settings - definitions with defaults and sanitizers, and their values.

SettingsBase resolves a setting's current value from a raw store, passing
it through the setting's sanitize callback and falling back to the
declared default. Concrete types decide where raw values live.
"""
