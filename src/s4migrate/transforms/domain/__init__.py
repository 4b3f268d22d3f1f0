"""Transform domain models."""
