"""HTTP service for the catalog triage engine."""
