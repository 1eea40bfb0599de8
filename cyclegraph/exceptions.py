"""Exception types.

The graph algorithms never raise on their own: an acyclic graph is a regular
result, not an error. Failures only come from reading input, and are reported
as ``ValueError`` subclasses carrying a message that is safe to show to users.
"""

from __future__ import annotations


class EdgeFileError(ValueError):
    """Raised when an edge file is not valid TOML or has an unexpected shape."""
