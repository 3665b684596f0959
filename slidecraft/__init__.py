"""
SlideCraft

Generates slide decks from a text prompt or an uploaded PDF/DOCX document,
stored per user and browsable in a presentation viewer.
"""

__version__ = "1.0.0"
__author__ = "SlideCraft Team"
