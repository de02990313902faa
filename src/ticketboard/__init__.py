"""Kanban ticket tracker: grouping, filtering and ordering of ticket boards."""
