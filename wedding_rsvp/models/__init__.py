"""
Database models package
"""

from .rsvp import RSVP

__all__ = ["RSVP"]
