"""Fig Language Server package.

- A pygls-based Language Server for Fig source files.
- A static indexer that lexes and parses a buffer without running it.
"""

__all__ = [
    "server",
    "indexer",
]
