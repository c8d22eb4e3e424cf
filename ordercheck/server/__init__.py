"""FastAPI adapter around the ordercheck core engine."""
