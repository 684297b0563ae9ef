"""
HTML views.
"""
