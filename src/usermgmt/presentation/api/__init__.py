"""FastAPI application exposing roles and user profiles."""
