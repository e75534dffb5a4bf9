"""Ownership-scoped stores for boards, columns and tasks."""
