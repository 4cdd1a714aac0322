"""Pydantic schemas for the API."""
