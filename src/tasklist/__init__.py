"""Tasklist - multi-tenant task list API.

Users sign up with email and password, log in for a bearer token, and
manage a private set of tasks scoped to their account.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
