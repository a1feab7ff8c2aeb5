"""Application layer for identity use cases."""
