"""
Contact Book: a single-user address book persisted to a local binary file.
"""

__version__ = "2.0.0"
