"""Core business logic layer.

Subpackages:
- recipes: version bumping and pinned-version resolution
- planning: the greedy plan generator and plan edits
- shopping: shopping list aggregation and edits
- reporting: meal history statistics

Everything here is pure: callers load from and persist to homechef.infra.
"""
__all__ = ["recipes", "planning", "shopping", "reporting"]
