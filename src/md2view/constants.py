#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the md2view library.

This module centralizes the node kind tags, presentation discriminants,
style role names and default configuration values used across md2view.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Syntax Node Kinds - Tags understood by the node dispatcher
3. Presentation Discriminants - Tags carried by rendered output
4. Rendering Defaults - Default configuration values
5. Parser Constants - Settings for the Markdown parser adapter
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

PresentationKind = Literal["text-leaf", "container"]
ContainerVariant = Literal["generic", "pressable", "media"]
OutputFormat = Literal["tree", "json"]

# A style reference is the role name of an entry in the resolved style table
StyleRef = str

# =============================================================================
# Syntax Node Kinds
# =============================================================================

KIND_TEXT = "text"
KIND_H1 = "h1"
KIND_H2 = "h2"
KIND_H3 = "h3"
KIND_H4 = "h4"
KIND_H5 = "h5"
KIND_H6 = "h6"
KIND_RULE = "hr"
KIND_BLOCK = "div"
KIND_UNORDERED_LIST = "ul"
KIND_ORDERED_LIST = "ol"
KIND_LIST_ITEM = "li"
KIND_LINK = "a"
KIND_MEDIA = "img"
KIND_EMPHASIS = "em"
KIND_STRONG = "strong"
KIND_STRIKETHROUGH = "del"
KIND_UNDERLINE = "u"
KIND_INLINE_CODE = "code"
KIND_QUOTE = "blockquote"
KIND_CUSTOM = "custom"

HEADING_KINDS = (KIND_H1, KIND_H2, KIND_H3, KIND_H4, KIND_H5, KIND_H6)

# Inline kinds rendered as text with an extra cascaded style of the same name
STYLED_TEXT_KINDS = HEADING_KINDS + (KIND_STRONG, KIND_EMPHASIS, KIND_STRIKETHROUGH, KIND_UNDERLINE)

# Payloads treated as absent upstream data
NULL_SENTINELS = frozenset({"", "null", "undefined"})

# =============================================================================
# Presentation Discriminants
# =============================================================================

TEXT_LEAF: PresentationKind = "text-leaf"
CONTAINER: PresentationKind = "container"

VARIANT_GENERIC: ContainerVariant = "generic"
VARIANT_PRESSABLE: ContainerVariant = "pressable"
VARIANT_MEDIA: ContainerVariant = "media"

# =============================================================================
# Style Roles
# =============================================================================

ROLE_BLOCK = "block"
ROLE_BLOCK_QUOTE = "blockQuote"
ROLE_RULE = "hr"
ROLE_TEXT = "text"
ROLE_LINK = "link"
ROLE_LINK_WRAPPER = "linkWrapper"
ROLE_LIST = "list"
ROLE_LIST_ITEM = "listItem"
ROLE_LIST_ITEM_CONTENT = "listItemContent"
ROLE_LIST_ITEM_TEXT_CONTENT = "listItemTextContent"
ROLE_LIST_ITEM_BULLET = "listItemBullet"
ROLE_LIST_ITEM_NUMBER = "listItemNumber"
ROLE_IMAGE_WRAPPER = "imageWrapper"
ROLE_IMAGE = "image"
ROLE_CODE = "code"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_DEBUG = False
DEFAULT_USE_DEFAULT_STYLES = True
DEFAULT_PARSE_INLINE = False
DEFAULT_RENDER_INLINE = False
DEFAULT_BULLET_GLYPH = "•"

# Syntax nesting levels; each level costs a handful of interpreter frames
DEFAULT_MAX_DEPTH = 64
DEFAULT_FAIL_ON_DEPTH_EXCEEDED = False

# Props applied to collapsed text blocks when render_inline is enabled
INLINE_TEXT_PROPS = {"numberOfLines": 1, "ellipsizeMode": "tail"}

# =============================================================================
# Parser Constants
# =============================================================================

# Trailing break required by the block grammar to close the final block
BLOCK_SOURCE_SUFFIX = "\n\n"

DEFAULT_MARKDOWN_PLUGINS = ("strikethrough",)
