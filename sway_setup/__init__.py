"""Arch + Sway desktop provisioning (Python-first, step-driven).

Core design goals:
- Idempotent steps, safe to re-run
- Explicit per-step failure policy (critical vs best-effort)
- Backups of anything a managed config would overwrite
- Centralized logging to a per-run file
"""

__all__ = []
