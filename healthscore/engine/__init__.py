"""Scoring engine: pillar aggregation, status and result types."""
