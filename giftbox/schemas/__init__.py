"""Pydantic request/response bodies for the HTTP layer."""
