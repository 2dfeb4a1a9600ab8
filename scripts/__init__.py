"""
Developer scripts.
"""
