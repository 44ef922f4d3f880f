"""containerd system extension manager.

Core design goals:
- Single image per extension name (install overwrites)
- Fail-fast install, idempotent remove
- Pinned upstream releases, architecture-aware downloads
- Host access behind a small controller interface
- Centralized logging
"""

__all__ = []
