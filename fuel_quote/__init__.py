"""
Fuel Quote Backend Application - root package.

This package contains the FastAPI app entry point (main.py), API routes,
account/profile and quote use cases, the pricing engine, and the storage
adapters (MongoDB and in-memory).
"""
