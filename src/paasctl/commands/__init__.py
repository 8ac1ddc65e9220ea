"""Command groups for paasctl."""
