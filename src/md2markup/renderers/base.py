#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/renderers/base.py
"""Base class for event stream renderers.

This module defines the abstract base class that renderers inherit from. A
renderer folds a flat event stream into an output representation.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from md2markup.events import Event
from md2markup.exceptions import InvalidOptionsError
from md2markup.options.markup import RenderOptions


class BaseRenderer(ABC):
    """Abstract base class for event stream renderers.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Rendering options. If None, default options are used.

    Examples
    --------
    Creating a custom renderer:

        >>> from md2markup.events import Text
        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render(self, events):
        ...         return "".join(e.text for e in events if isinstance(e, Text))

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options: RenderOptions = options or RenderOptions()

    @abstractmethod
    def render(self, events: Sequence[Event]) -> Any:
        """Render an event stream.

        Parameters
        ----------
        events : sequence of Event
            Flat event stream to render

        Returns
        -------
        Any
            Renderer-specific output

        """
        pass

    def render_to_string(self, events: Sequence[Event]) -> str:
        """Render an event stream to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: Any, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
