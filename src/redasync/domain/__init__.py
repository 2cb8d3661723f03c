"""Domain model and pure reconciliation logic."""
