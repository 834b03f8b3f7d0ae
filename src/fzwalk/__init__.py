"""Live fuzzy name search over a directory tree."""
