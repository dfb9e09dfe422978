"""Rings and reductions over ring elements."""
