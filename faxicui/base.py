"""Base classes for drawable components and their styles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .buffer import Gbuffer


class DrawStyle:
    """Base for the style a component is drawn with."""


class DrawBase(ABC):
    """A component that renders itself into a frame buffer."""

    def __init__(self, style: DrawStyle) -> None:
        self.style = style

    @abstractmethod
    def draw(self, buf: Gbuffer) -> None:
        """Render the component into ``buf``."""