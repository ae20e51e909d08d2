"""Scaffolding helpers for generating application skeletons."""
