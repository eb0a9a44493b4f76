#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/api.py
"""Public entry points for rendering Markdown to markup.

The functions here tokenize Markdown, fold the events into a markup tree and,
for the embedding helpers, wrap the result in the container a host page
mounts. Render failures surface as :class:`~md2markup.exceptions.RenderError`
from the low-level functions; :func:`markdown_view` instead logs the failure
and returns a visible error box so no content is silently dropped.

"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional

from md2markup.constants import ERROR_BOX_TITLE
from md2markup.exceptions import RenderError
from md2markup.markup import Element, Fragment, TextNode, to_html
from md2markup.options.markup import RenderOptions
from md2markup.renderers.markup import MarkdownRenderer
from md2markup.styles import MarkdownClasses, join_classes, prose_classes

logger = logging.getLogger(__name__)


def _create_options(options: Optional[RenderOptions], **kwargs: Any) -> RenderOptions:
    """Merge keyword overrides into an options instance.

    Unknown keyword names are skipped with a DEBUG message.
    """
    options = options or RenderOptions()
    if not kwargs:
        return options

    option_names = {field.name for field in fields(RenderOptions)}
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    missing = [k for k in kwargs if k not in valid_kwargs]
    if missing:
        logger.debug(f"Skipping unknown render options: {missing}")
    return options.create_updated(**valid_kwargs)


def render_markdown(content: str, options: Optional[RenderOptions] = None, **kwargs: Any) -> Fragment:
    r"""Render Markdown text to a markup fragment.

    Parameters
    ----------
    content : str
        Markdown source
    options : RenderOptions, optional
        Rendering options. Defaults are used when omitted.
    kwargs : Any
        Individual option overrides, e.g. ``open_links_new_tab=False``

    Returns
    -------
    Fragment
        Top-level markup nodes; the caller supplies any wrapper

    Raises
    ------
    RenderError
        If the content is not text or the tokenizer fails
    DependencyError
        If mistune is not installed

    Examples
    --------
        >>> from md2markup import render_markdown, to_html
        >>> to_html(render_markdown("# Title"))
        '<h1>Title</h1>'

    """
    return MarkdownRenderer(_create_options(options, **kwargs)).render(content)


def render_markdown_string(content: str) -> Fragment:
    """Render Markdown text with default options."""
    return render_markdown(content)


def render_markdown_with_options(content: str, options: RenderOptions) -> Fragment:
    """Render Markdown text with the given options."""
    return render_markdown(content, options)


def error_box(message: str) -> Element:
    """Build the fallback element shown in place of content that failed to render.

    Parameters
    ----------
    message : str
        Human-readable failure description

    Returns
    -------
    Element
        ``div`` holding a title paragraph and the message paragraph

    """
    return Element(
        "div",
        {"class": MarkdownClasses.ERROR_BOX},
        (
            Element("p", {"class": MarkdownClasses.ERROR_TITLE}, (TextNode(ERROR_BOX_TITLE),)),
            Element("p", {"class": MarkdownClasses.ERROR_MESSAGE}, (TextNode(message),)),
        ),
    )


def markdown_view(
    content: str,
    class_name: Optional[str] = None,
    options: Optional[RenderOptions] = None,
    **kwargs: Any,
) -> Element:
    """Render Markdown into a mountable container element.

    The container carries the bulk prose preset plus ``class_name``. When
    rendering fails the error is logged and the error box is returned instead.

    Parameters
    ----------
    content : str
        Markdown source
    class_name : str, optional
        Extra classes appended to the container
    options : RenderOptions, optional
        Rendering options
    kwargs : Any
        Individual option overrides

    Returns
    -------
    Element
        Content container or error box

    """
    try:
        fragment = render_markdown(content, options, **kwargs)
    except RenderError as e:
        logger.error("Failed to render markdown: %s", e.message)
        return error_box(e.message)

    return content_container(fragment, class_name)


def content_container(fragment: Fragment, class_name: Optional[str] = None) -> Element:
    """Wrap a rendered fragment in a ``div`` carrying the prose preset and ``class_name``."""
    return Element("div", {"class": join_classes(prose_classes(), class_name)}, fragment)


def markdown_to_html(
    content: str,
    class_name: Optional[str] = None,
    options: Optional[RenderOptions] = None,
    *,
    fragment_only: bool = False,
    **kwargs: Any,
) -> str:
    r"""Render Markdown to an HTML string.

    Parameters
    ----------
    content : str
        Markdown source
    class_name : str, optional
        Extra classes for the container (ignored when ``fragment_only``)
    options : RenderOptions, optional
        Rendering options
    fragment_only : bool, default False
        Serialize the bare fragment without the container. Render errors
        then propagate instead of producing the error box.
    kwargs : Any
        Individual option overrides

    Returns
    -------
    str
        HTML text

    Examples
    --------
        >>> markdown_to_html("Hello *world*", fragment_only=True)
        '<p>Hello <em>world</em></p>'

    """
    if fragment_only:
        return to_html(render_markdown(content, options, **kwargs))
    return to_html(markdown_view(content, class_name, options, **kwargs))
