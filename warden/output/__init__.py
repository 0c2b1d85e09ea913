"""
Warden Output Module
=====================

Console renderers and report generators for Warden results.
"""

from warden.output.console import WardenConsoleOutput
from warden.output.report import WardenReportGenerator

__all__ = ["WardenConsoleOutput", "WardenReportGenerator"]
