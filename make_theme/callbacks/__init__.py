"""Named callbacks - sanitizers and view predicates referenced by name."""
