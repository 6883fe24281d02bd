"""Reference path resolution for API entities."""

from __future__ import annotations

import logging
from typing import Callable

from api_docs_tools.config import GenerateStyle
from api_docs_tools.model import ApiItem, ApiItemKind, ApiModel, ApiPackage
from api_docs_tools.naming import safe_path_from_display_name

logger = logging.getLogger(__name__)

Sanitizer = Callable[[str], str]

_BOUNDARY_KINDS = frozenset(
    {
        ApiItemKind.MODEL,
        ApiItemKind.ENTRY_POINT,
        ApiItemKind.PACKAGE,
    }
)

_ADDRESSABLE_KINDS = frozenset(
    {
        ApiItemKind.ENUM,
        ApiItemKind.FUNCTION,
        ApiItemKind.VARIABLE,
        ApiItemKind.TYPE_ALIAS,
        ApiItemKind.CLASS,
        ApiItemKind.INTERFACE,
    }
)


def resolve(
    style: GenerateStyle,
    item: ApiItem,
    model: ApiModel,
    package: ApiPackage,
    *,
    sanitize: Sanitizer = safe_path_from_display_name,
) -> str:
    """Resolve the reference path of *item* within *package*.

    Each node of the hierarchy contributes one segment: boundaries
    (model, entry point, package) contribute nothing, addressable
    declarations contribute ``<kind>#<name>`` and any other container
    contributes ``.<name>``. Segments are joined without a separator, so a
    namespace followed by a function yields ``.NSfunction#bar``.

    Parameters
    ----------
    style:
        With :attr:`GenerateStyle.PREFIX` the package name is embedded.
    item:
        Entity to resolve.
    model:
        Model the entity belongs to. Not consulted.
    package:
        Package the entity belongs to.
    sanitize:
        Maps a display name to a path-safe token.
    """
    base_name = ""
    for hierarchy_item in item.get_hierarchy():
        base_name += _segment(hierarchy_item, sanitize)

    if style == GenerateStyle.PREFIX:
        reference = f"./{package.display_name}-{base_name}"
    else:
        reference = f"./{base_name}"
    logger.debug("resolved %s '%s' to %s", item.kind.value, item.display_name, reference)
    return reference


def _segment(item: ApiItem, sanitize: Sanitizer) -> str:
    if item.kind in _BOUNDARY_KINDS:
        return ""
    qualified_name = sanitize(item.display_name)
    if item.kind in _ADDRESSABLE_KINDS:
        return f"{item.kind.value.lower()}#{qualified_name}"
    return f".{qualified_name}"
