"""Topics (admin-managed)."""
