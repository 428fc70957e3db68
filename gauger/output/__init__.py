"""
Gauger Output
==============

Rich console rendering of analysis results.
"""

from gauger.output.console import GaugeConsoleOutput, mask_password

__all__ = ["GaugeConsoleOutput", "mask_password"]
