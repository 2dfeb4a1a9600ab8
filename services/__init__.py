"""
Service packages.
"""
