"""Service layer for rules that sit between the routers and persistence."""
