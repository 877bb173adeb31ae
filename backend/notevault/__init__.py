"""
AI Notes App backend.
"""
