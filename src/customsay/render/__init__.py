"""Renderers for speech bubbles and complete scenes."""

from customsay.render.bubble import BubbleRenderer
from customsay.render.scene import SceneRenderer

__all__ = ["BubbleRenderer", "SceneRenderer"]
