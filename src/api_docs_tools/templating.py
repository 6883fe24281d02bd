"""Jinja2 integration for reference resolution and content builders."""

from __future__ import annotations

from functools import partial
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined

from api_docs_tools.builder import ContentBuilder, create_content_builder
from api_docs_tools.config import DocsConfig
from api_docs_tools.model import ApiItem, ApiModel, ApiPackage
from api_docs_tools.naming import safe_path_from_display_name
from api_docs_tools.resolver import Sanitizer, resolve


def create_environment(
    config: DocsConfig,
    model: ApiModel,
    package: ApiPackage,
    *,
    loader: BaseLoader | None = None,
    sanitize: Sanitizer = safe_path_from_display_name,
) -> Environment:
    """Create a template environment bound to *package* of *model*.

    Templates get an ``api_ref`` filter resolving an item to its reference
    path, a ``content_builder()`` global returning a fresh builder at the
    configured indent level, and the ``generate_style`` global. The ``do``
    extension is enabled so templates can drive a builder.
    """
    env = Environment(
        loader=loader,
        trim_blocks=True,
        lstrip_blocks=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        extensions=["jinja2.ext.do"],
    )

    def api_ref(item: ApiItem) -> str:
        return resolve(config.style, item, model, package, sanitize=sanitize)

    env.filters["api_ref"] = api_ref
    env.globals["content_builder"] = partial(_new_builder, config)
    env.globals["generate_style"] = config.style
    return env


def render_template(env: Environment, name: str, **context: Any) -> str:
    """Render the template *name* of *env* with *context*."""
    return env.get_template(name).render(context)


def _new_builder(config: DocsConfig) -> ContentBuilder:
    return create_content_builder(config.builder_options())
