"""Settings for the flatcalc CLI, read from FLATCALC_* environment variables.

Each call to load_settings() reads the environment afresh, so tests can
pass their own mapping instead of patching os.environ.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from rich.console import Console

DEFAULT_DEMO_EXPRESSION = "5+6*6"

_TRUTHY = ("1", "true", "yes", "on")


def _flag(env: Mapping[str, str], key: str) -> bool:
    return env.get(key, "").strip().lower() in _TRUTHY


@dataclass
class Settings:
    """Resolved CLI settings."""

    demo_expression: str = DEFAULT_DEMO_EXPRESSION
    show_tree: bool = False
    no_color: bool = False


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``env`` (defaults to os.environ).

    FLATCALC_DEMO_EXPRESSION overrides the expression used by ``demo``.
    FLATCALC_SHOW_TREE makes ``eval`` print the AST as well.
    NO_COLOR (any value) or FLATCALC_NO_COLOR (truthy) disable colour.
    """
    env = os.environ if env is None else env
    demo = env.get("FLATCALC_DEMO_EXPRESSION", "").strip() or DEFAULT_DEMO_EXPRESSION
    return Settings(
        demo_expression=demo,
        show_tree=_flag(env, "FLATCALC_SHOW_TREE"),
        no_color="NO_COLOR" in env or _flag(env, "FLATCALC_NO_COLOR"),
    )


def make_console(settings: Settings, stderr: bool = False) -> Console:
    """Console honouring the colour setting."""
    return Console(stderr=stderr, no_color=settings.no_color, highlight=False)
