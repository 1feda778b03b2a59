"""
API layer for the Fuel Quote backend.

Exposes HTTP endpoints under /api/v1 (auth, profile, quotes).
"""
