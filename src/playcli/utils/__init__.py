"""Small helpers shared across play-cli."""
