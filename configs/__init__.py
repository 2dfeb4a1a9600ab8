"""
Centralized configuration.
"""
