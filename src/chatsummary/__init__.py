"""Chat summarization service."""
