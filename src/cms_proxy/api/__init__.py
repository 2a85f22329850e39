"""HTTP layer (FastAPI app and collection routes)."""
