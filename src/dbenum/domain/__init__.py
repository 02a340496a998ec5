"""Naming, case parsing, and module rendering rules.

Nothing in this package writes to disk; rendering only reads templates.
"""
