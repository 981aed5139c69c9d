"""Email body rendering with Jinja2."""
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import (ChainableUndefined, Environment, FileSystemLoader,
                    select_autoescape)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
PLACEHOLDER = "N/A"


class _PlaceholderUndefined(ChainableUndefined):
    """Missing keys (and attributes of missing keys) render as a placeholder."""

    def __str__(self) -> str:
        return PLACEHOLDER


def _placeholder_none(value: Any) -> Any:
    return PLACEHOLDER if value is None else value


class TemplateRenderer:
    """Renders named HTML templates (`stock_quote` -> `stock_quote.html`).

    Rendering is a pure function of the context: absent or None values show
    up as "N/A" instead of raising.
    """

    def __init__(self, templates_dir: Path | str = TEMPLATES_DIR) -> None:
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=_PlaceholderUndefined,
            finalize=_placeholder_none,
        )

    def render(self, template: str, context: Mapping[str, Any] | None = None) -> str:
        return self._env.get_template(f"{template}.html").render(**dict(context or {}))
