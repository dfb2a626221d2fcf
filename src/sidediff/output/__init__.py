"""Renderers for side-by-side output."""

from sidediff.output.base import Renderer
from sidediff.output.plain import PlainRenderer
from sidediff.output.terminal import TerminalRenderer

__all__ = ["PlainRenderer", "Renderer", "TerminalRenderer"]
