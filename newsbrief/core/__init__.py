"""Core components: fetching, extraction, site resolution and summarization."""
