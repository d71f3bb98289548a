"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(settings, the NocoDB client, CORS, error translation, logging). Keep
feature-specific logic in the corresponding feature package
(e.g. `citizens/`).
"""
