"""Typer commands for TinyTodo CLI."""
