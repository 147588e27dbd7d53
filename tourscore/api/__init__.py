"""Stateless HTTP surface over the scoring engine."""
