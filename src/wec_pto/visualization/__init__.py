"""Visualization modules."""

from .frame_renderer import FrameRenderer

__all__ = ["FrameRenderer"]
