"""
Gauger Pattern Data
====================

Static, versioned weak-pattern tables consumed by the analyzers.
"""

from gauger.data.patterns import DEFAULT_TABLES, TABLE_VERSION, PatternTables

__all__ = ["DEFAULT_TABLES", "TABLE_VERSION", "PatternTables"]
