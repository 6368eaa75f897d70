"""Field validation and signature reconciliation transforms."""
