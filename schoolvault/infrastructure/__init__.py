"""Infrastructure adapters (persistence, logging, events, jobs)."""
