"""Small character, memory, string, token, output and linked-list utilities."""

__all__ = ["chars", "memory", "strings", "tokens", "output", "lists"]