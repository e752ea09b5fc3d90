"""Cats API: a cat collection enriched with pictures from cataas.com."""
