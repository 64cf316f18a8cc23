"""Runeterra helper: League of Legends lookups over Data Dragon."""
