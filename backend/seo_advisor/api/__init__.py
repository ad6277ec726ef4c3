"""API layer - HTTP routers."""
