"""
Shared helpers -- structured logging and timing.
"""
