"""
Members Portal backend.
"""
