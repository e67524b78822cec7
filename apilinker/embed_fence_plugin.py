"""markdown-it plugin that turns tagged code fences into runnable embeds.

A fence such as::

    ```dartpad height=500 run=false mode=flutter

renders as ``<DartPad code="<base64>" :height="500" :run="false"
mode="flutter">`` wrapping the normally highlighted code.
"""

import base64
import re
from collections.abc import MutableMapping, Sequence
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token
from markdown_it.utils import OptionsDict

HEIGHT_RE = re.compile(r"\bheight=(\d+)")
RUN_RE = re.compile(r"\brun=(true|false)")


def embed_attrs(code: str, meta: str, modes: Sequence[str]) -> list[str]:
    """Build the component attributes for a fence's code and info meta."""
    encoded = base64.b64encode(code.encode("utf-8")).decode("ascii")
    attrs = [f'code="{encoded}"']

    height = HEIGHT_RE.search(meta)
    if height:
        attrs.append(f':height="{height.group(1)}"')

    run = RUN_RE.search(meta)
    if run:
        attrs.append(f':run="{run.group(1)}"')

    if modes:
        mode_re = re.compile(r"\bmode=(" + "|".join(map(re.escape, modes)) + ")")
        mode = mode_re.search(meta)
        if mode:
            attrs.append(f'mode="{mode.group(1)}"')

    return attrs


def embed_fence_plugin(
    md: MarkdownIt,
    *,
    tag: str = "dartpad",
    component: str = "DartPad",
    language: str = "dart",
    modes: Sequence[str] = ("dart", "flutter"),
) -> None:
    """Install the ``fence`` override on ``md``."""
    default_fence = md.renderer.rules["fence"]

    def render_fence(
        self: RendererHTML,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str:
        token = tokens[idx]
        info = token.info.strip()
        if not info.startswith(tag):
            return default_fence(tokens, idx, options, env)

        attrs = embed_attrs(token.content, info[len(tag) :].strip(), modes)

        # Highlight as the embed's language, then restore the original info
        original_info = token.info
        token.info = language
        try:
            highlighted = default_fence(tokens, idx, options, env)
        finally:
            token.info = original_info

        return f"<{component} {' '.join(attrs)}>{highlighted}</{component}>\n"

    md.add_render_rule("fence", render_fence)
