"""Rule domain models and enums."""
