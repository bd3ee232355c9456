"""
Combodate - The current moment in several formats at once.

Prints Unix time, ISO-8601 Gregorian and week-date representations, and
the proportion of the current day, week, month and year that has elapsed,
as a right-aligned two-column table.

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Combodate Team"
