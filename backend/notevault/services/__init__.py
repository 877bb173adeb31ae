"""
Application services: AI orchestration, reconciliation, auto-save and storage.
"""
