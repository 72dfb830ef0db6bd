"""User accounts and the admin-request workflow."""
