"""Mortgage API service: FastAPI app exposing the mortgage calculation library."""
