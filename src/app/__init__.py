"""Inventory API.

A small REST backend exposing products stored in a relational table.
"""

__version__ = "0.1.0"
