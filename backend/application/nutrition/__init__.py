"""Application layer for nutrition targets (commands, queries)."""
