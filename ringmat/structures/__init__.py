"""Matrix representations over rings."""
