"""Infrastructure layer for Tasklist.

Contains the HTTP API, authentication and persistence adapters.
"""
