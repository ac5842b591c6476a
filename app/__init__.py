"""Berry users API."""
