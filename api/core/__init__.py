"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (settings, DB
access, the table catalog, sanitizing, validation, result envelopes). Keep
entity-specific SQL and business logic in the feature package (e.g.
`articles/`).
"""
