"""Authentication and the authorization guard chain."""
