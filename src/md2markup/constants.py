#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2markup.

This module centralizes the hardcoded values and default configuration
constants used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Rendering Defaults - RenderOptions default values
3. Markup Constants - Tag names and attribute values
4. Tokenizer Constants - Front matter delimiters and dependencies
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

CodeThemeName = Literal["default", "dark", "light", "github", "monokai"]
MetadataStyle = Literal["yaml", "toml"]
OutputFormat = Literal["html", "json"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_ENABLE_GFM = True
DEFAULT_CODE_THEME: CodeThemeName = "default"
DEFAULT_EMIT_LANGUAGE_CLASSES = True
DEFAULT_OPEN_LINKS_NEW_TAB = True
DEFAULT_ALLOW_RAW_HTML = True
DEFAULT_USE_EXPLICIT_STYLING = False

DEFAULT_ENABLE_MATH = True
DEFAULT_ENABLE_DEFINITION_LISTS = True
DEFAULT_ENABLE_SUPERSCRIPT_SUBSCRIPT = False
DEFAULT_ENABLE_METADATA_BLOCKS = True

# Value accepted for "no theme" when themes are given by name (CLI, config)
CODE_THEME_NONE = "none"

# =============================================================================
# Markup Constants
# =============================================================================

LANGUAGE_CLASS_PREFIX = "language-"
GENERIC_CODE_LANGUAGE = "text"

NEW_TAB_TARGET = "_blank"
NEW_TAB_REL = "noopener noreferrer"

# Elements that never carry children and are written without a closing tag
VOID_ELEMENTS = frozenset({"area", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"})

ERROR_BOX_TITLE = "Failed to render markdown content"

# =============================================================================
# Tokenizer Constants
# =============================================================================

YAML_FRONTMATTER_DELIMITER = "---"
TOML_FRONTMATTER_DELIMITER = "+++"

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

GFM_PLUGINS = ("strikethrough", "table", "footnotes", "task_lists", "url")
MATH_PLUGINS = ("math",)
DEFINITION_LIST_PLUGINS = ("def_list",)
SUPERSCRIPT_SUBSCRIPT_PLUGINS = ("superscript", "subscript")
