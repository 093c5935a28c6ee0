"""Activity Explorer backend."""
