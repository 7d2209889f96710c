"""
Core utilities shared across the gift service.

This package hosts configuration (env vars, paths, feature flags), logging
setup and the caller identity used for audit stamping.
"""
