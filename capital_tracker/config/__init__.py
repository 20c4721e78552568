"""
Configuration module.

Built-in defaults, YAML overrides and validation for target, currency,
chart scaling and persistence settings.
"""
