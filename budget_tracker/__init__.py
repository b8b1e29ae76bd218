"""
Budget Tracker - Source Package

A personal finance ledger: record income and expenses, summarise them
by category, and keep them in a plain text file between runs.

DESIGN PRINCIPLES:
1. The transaction list is the single source of truth
2. Fail early, fail visibly
3. No silent corrections
4. Every ledger change is auditable
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Budget Tracker Team"
