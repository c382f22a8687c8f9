"""Pure calendar and phase arithmetic."""
