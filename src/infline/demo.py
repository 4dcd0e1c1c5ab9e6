"""
demo.py - Render infinite lines through a pan/zoom sequence to PNG files.

Usage:
    python -m infline.demo [output_dir]

Each frame sets new axes limits; the trackers re-clip their lines and the
resulting segments are logged next to the saved image.
"""

import sys
import logging
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt

from infline.config import DemoConfig
from infline.lines import draw_horizontal_line, draw_infinite_line, draw_vertical_line
from infline.logging_utils import configure_logging

# (xlim, ylim) per frame; the last one is inverted on both axes.
VIEWS = [
    ((0.0, 10.0), (-1.0, 6.0)),
    ((2.0, 6.0), (0.0, 4.0)),
    ((-20.0, 20.0), (-20.0, 20.0)),
    ((5.0, 9.0), (3.0, 6.0)),
    ((10.0, 0.0), (6.0, -1.0)),
]


def main(output_dir: Optional[Union[Path, str]] = None,
         config: Optional[DemoConfig] = None) -> List[Path]:
    """Draw the demo figure, step through `VIEWS`, and return the saved image paths."""
    if config is None:
        config = DemoConfig() if output_dir is None else DemoConfig(output_dir=Path(output_dir))

    configure_logging(level=config.logger_level, log_dir=config.log_dir,
                      name="infline", run_prefix="demo")
    logger = logging.getLogger("infline.demo")
    logger.info(f"DemoConfig: {asdict(config)}")

    width_in = config.img_size[0] / config.dpi
    height_in = config.img_size[1] / config.dpi
    fig, ax = plt.subplots(figsize=(width_in, height_in), dpi=config.dpi)

    paths: List[Path] = []
    try:
        rng = np.random.default_rng(0)
        xs = np.linspace(0.0, 10.0, 50)
        ax.plot(xs, 0.5 * xs + rng.normal(0.0, 0.3, xs.size), "o", label="samples")

        lines = [
            draw_infinite_line(0.5, 0.0, 0.0, "r--", ax=ax),
            draw_horizontal_line(2.5, ax=ax, color="tab:gray"),
            draw_vertical_line(4.0, ":", ax=ax),
        ]
        ax.legend()

        for i, (xlim, ylim) in enumerate(VIEWS):
            ax.set_xlim(*xlim)
            ax.set_ylim(*ylim)
            for line in lines:
                logger.info(f"view {i}: {line.tracker.equation} -> {line.tracker.segment}")
            path = config.output_dir / f"view_{i:02d}.png"
            fig.savefig(path, dpi=config.dpi)
            paths.append(path)
    finally:
        plt.close(fig)

    logger.info(f"Wrote {len(paths)} images to {config.output_dir}")
    return paths


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
