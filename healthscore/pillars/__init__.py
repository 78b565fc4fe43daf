"""Pillar calculators, their registry and advice tables."""
