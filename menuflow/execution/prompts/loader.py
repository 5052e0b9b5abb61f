"""
Jinja2 rendering for the console's multi-line output blocks.

Menus and the visited-path listing are kept as .jinja2 files next to this
module so that their layout can change without touching the Console.
Every rendered block ends with a newline and can be written out as-is.
"""

from functools import lru_cache
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined


class Template:
    """File stems under templates/, one per rendered block."""

    MENU = "menu"
    PATH = "path"


TEMPLATES_DIR = Path(__file__).parent / "templates"


def _validate_templates():
    """Fails fast at import if a Template constant has no file behind it."""
    for name in dir(Template):
        if name.startswith("_"):
            continue
        path = TEMPLATES_DIR / f"{getattr(Template, name)}.jinja2"
        if not path.exists():
            raise FileNotFoundError(f"Template missing: {path}")


_validate_templates()


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    # Console text, not HTML: no autoescaping. StrictUndefined turns a
    # misspelled variable into an error instead of a silent blank.
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(template_name: str, **context) -> str:
    template = _get_environment().get_template(f"{template_name}.jinja2")
    return template.render(**context)


def render_menu(options: Sequence[str], title: str = "", start: int = 1) -> str:
    """
    Renders a numbered option list, e.g. for a BranchOnInt(start, ...) state:

        Main menu
        1. Addition
        2. Subtraction
    """
    return render(Template.MENU, options=list(options), title=title, start=start)


def render_path(stack: Sequence[str]) -> str:
    """Renders the visited path, oldest visit first."""
    return render(Template.PATH, stack=list(stack))
