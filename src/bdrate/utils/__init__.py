"""Small helpers shared across bdrate."""
