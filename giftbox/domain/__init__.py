"""Domain records and pure helpers (no I/O)."""
