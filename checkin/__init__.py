# =======================================================================================
# checkin/__init__.py - Package Initialization
# =======================================================================================
"""
Event Check-in - RFID tags, gate scans and meal credits

A small HTTP service that registers attendees, issues RFID tags at the
entrance desk and decides allow/deny for entrance, exit and cafeteria scans.
"""

__version__ = "1.0.0"
__author__ = "Event Check-in Team"
