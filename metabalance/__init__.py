"""MetaBalance backend package."""
