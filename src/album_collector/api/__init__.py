"""HTTP applications for Album Collector."""
