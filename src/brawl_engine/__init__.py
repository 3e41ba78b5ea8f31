"""Battle-resolution engine for a character battler."""
