"""Infrastructure layer - adapters for persistence and export."""
