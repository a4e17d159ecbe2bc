# noqa: D104
"""Services: timezone alias resolution and line processing."""
