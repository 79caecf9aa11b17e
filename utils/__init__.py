"""
Presentation helpers.
"""
