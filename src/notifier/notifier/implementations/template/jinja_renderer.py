# ABOUTME: Jinja2 implementation of AbstractMessageRenderer
# ABOUTME: Renders title and body templates in a sandbox and aggregates template errors

from functools import lru_cache
from typing import Dict

from jinja2 import StrictUndefined, Template
from jinja2.sandbox import SandboxedEnvironment

from notifier.config.logging import get_logger
from notifier.exceptions import RenderError
from notifier.interfaces.renderer import AbstractMessageRenderer
from notifier.models.alert import AlertGroupView
from notifier.models.notification import RenderedMessage


class JinjaMessageRenderer(AbstractMessageRenderer):
    """
    Jinja2 message renderer.

    Templates run in a ``SandboxedEnvironment`` with ``StrictUndefined`` so that
    a reference to a missing variable is a render error instead of silently
    producing empty text. Compiled templates are cached per template source.

    Both templates are always attempted. When either fails, a single
    ``RenderError`` lists every failing template under ``details["templates"]``.
    """

    def __init__(self, cache_size: int = 128):
        self._env = SandboxedEnvironment(
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
        self._compile = lru_cache(maxsize=cache_size)(self._env.from_string)
        self._logger = get_logger(__name__)

    def _render_one(self, source: str, context: dict) -> str:
        template: Template = self._compile(source)
        return template.render(context)

    def render(self, view: AlertGroupView, title_template: str, body_template: str) -> RenderedMessage:
        context = view.as_template_context()
        rendered: Dict[str, str] = {}
        failures: Dict[str, str] = {}

        for name, source in (("title", title_template), ("content", body_template)):
            try:
                rendered[name] = self._render_one(source, context)
            except Exception as e:  # any failure while compiling or evaluating a template
                failures[name] = f"{type(e).__name__}: {e}"

        if failures:
            summary = "; ".join(f"{name}: {error}" for name, error in failures.items())
            self._logger.debug(f"Template rendering failed for receiver '{view.receiver}': {summary}")
            raise RenderError(
                f"failed to template 'title' or 'content': {summary}",
                code="TEMPLATE_ERROR",
                details={"templates": failures},
            )

        return RenderedMessage(title=rendered["title"], body=rendered["content"])
