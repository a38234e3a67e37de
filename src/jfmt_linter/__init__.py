"""Rule engine and autofix composition for Java sources."""
