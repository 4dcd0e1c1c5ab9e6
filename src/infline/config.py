"""
config.py - Default styling for infinite lines and settings for the demo run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class LineDefaults:
    """Style applied when the caller does not choose one."""
    color: str = "k"
    linestyle: str = "-"
    legend_label: str = "_nolegend_"


@dataclass(frozen=True)
class DemoConfig:
    """Immutable configuration for `infline.demo`."""
    logger_level: int = logging.DEBUG
    img_size: Tuple[int, int] = (800, 600)
    dpi: int = 100
    output_dir: Path = Path("./out")
    log_dir: Path = Path("./logs")

    def __post_init__(self):
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "log_dir", Path(self.log_dir))
        self.output_dir.mkdir(parents=True, exist_ok=True)


DEFAULTS = LineDefaults()
