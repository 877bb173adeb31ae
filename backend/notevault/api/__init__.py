"""
API layer - request/response contracts and business exceptions.
"""
