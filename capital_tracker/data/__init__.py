"""
Data model module.

Capital entries, savings targets, the currency catalog and the formatting
helpers used for chart labels and entry lists.
"""
