"""
photoslotfinder - find bookable slots in photographers' calendars.
"""

__version__ = "0.1.0"
