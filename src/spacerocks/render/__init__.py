"""
Render module - hand-off point to the renderer.

This module contains:
- Snapshot: Renderable entity state for one frame
- build_snapshot: Capture a snapshot from the world
"""

from spacerocks.render.snapshot import Snapshot, build_snapshot

__all__ = ["Snapshot", "build_snapshot"]
