"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses: settings, DB
wiring, error kinds and logging. Feature-specific SQL and business logic
live in the feature package (e.g. `realstate/`).
"""
