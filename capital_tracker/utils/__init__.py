"""
Utility functions module.

Calendar-day semantics:
- Entries and targets carry a calendar day, never a time of day
- Two values are the same day when their year, month and day match
- Persisted days are Unix timestamps at UTC midnight of that day
"""
