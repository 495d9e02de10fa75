"""Discovery of project directories and their recency order."""
