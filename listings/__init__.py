"""Read-only racing and sports listing API."""
