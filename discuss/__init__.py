"""Discuss: threaded comments for external content."""
