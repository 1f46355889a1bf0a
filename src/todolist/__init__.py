"""Todolist - multi-tenant todo-list backend."""
