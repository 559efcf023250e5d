"""Per-invocation CLI state passed to subcommands via the click context."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from luxafor.models import AppConfig, LedTarget


@dataclass
class CliState:
    """Options resolved by the top-level group."""

    config: AppConfig
    config_path: Optional[Path] = None
    device: Optional[str] = None
    led: Optional[LedTarget] = None
