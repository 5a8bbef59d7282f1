"""Author a short personality survey, take it, and see where you land."""
