"""Podcast analytics dashboard backend."""
