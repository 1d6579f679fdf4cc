"""Error collection - structured, non-fatal failures reported by registries."""
