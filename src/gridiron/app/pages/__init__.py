"""Application pages."""
