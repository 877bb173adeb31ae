"""
Configuration, logging and session verification.
"""
