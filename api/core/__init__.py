"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, logging, error mapping). Keep collection-specific
queries in the corresponding feature package (e.g. `posts/`).
"""

