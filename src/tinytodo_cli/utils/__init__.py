"""Utility helpers for TinyTodo CLI."""
