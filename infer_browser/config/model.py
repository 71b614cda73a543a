from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str = "#"


def _default_nav_links() -> List[NavLink]:
    return [NavLink("Home"), NavLink("Docs"), NavLink("GitHub")]


@dataclass
class GlobalConfig:
    """
    Parsed global.json for the app.
    """
    model_path: Path
    ui_title: str = "Minimal Inference Demo"
    subtitle: str = "Load a model, paste a vector, predict"
    providers: List[str] = field(default_factory=lambda: ["CPUExecutionProvider"])
    nav_links: List[NavLink] = field(default_factory=_default_nav_links)
    input_placeholder: str = "e.g. 0.1 0.2 0.3 0.4 ..."
