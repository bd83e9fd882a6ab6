"""BudhHub learning management platform API."""
