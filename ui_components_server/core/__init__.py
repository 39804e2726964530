"""Documentation extraction engine: fetching, indexing, and scraping."""
