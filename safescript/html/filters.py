"""
Jinja2 filters for rendering SafeScript into HTML templates.

With ``autoescape=True`` Jinja2 would HTML-escape script text (turning
``"`` into ``&#34;`` and breaking it). These filters return
``markupsafe.Markup`` so the certified text is emitted unchanged, and only
accept values that are already ``SafeScript``.

Template usage::

    <script>{{ boot_script | safe_script }}</script>
    <script>window.CONFIG = {{ config | script_json }};</script>
    {{ boot_script | script_tag(nonce=csp_nonce) }}
"""

from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from safescript.html.safescript import SafeScript


def safe_script(value: Any) -> Markup:
    """Emit the text of a ``SafeScript``; raises ``TypeMismatchError`` for anything else."""
    return Markup(SafeScript.unwrap(value))


def script_json(value: Any) -> Markup:
    """Serialize *value* with ``SafeScript.from_json`` and emit it."""
    return Markup(SafeScript.unwrap(SafeScript.from_json(value)))


def script_tag(value: Any, nonce: str | None = None) -> Markup:
    """Wrap a ``SafeScript`` in a ``<script>`` element, with an optional CSP nonce."""
    text = SafeScript.unwrap(value)
    if nonce:
        return Markup('<script nonce="{}">').format(nonce) + Markup(text) + Markup("</script>")
    return Markup("<script>") + Markup(text) + Markup("</script>")


# Collection of all filters to register in a Jinja2 Environment
SCRIPT_FILTERS: dict[str, Any] = {
    "safe_script": safe_script,
    "script_json": script_json,
    "script_tag": script_tag,
}


def register_script_filters(env: Environment) -> Environment:
    """Install ``SCRIPT_FILTERS`` on *env* and return it."""
    env.filters.update(SCRIPT_FILTERS)
    return env
