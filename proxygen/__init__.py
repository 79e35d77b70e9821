"""Render printable card proxies from free-text decklists."""
