"""
Command-line host for the Color Spectrum Analyzer.

Usage:
    python spectrum_analyzer.py photo.png [--max-size 800] [--limit 20] [--seed 7] [--json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from SA_Libs.constants import DEFAULT_MAX_IMAGE_SIZE, DEFAULT_TABLE_LIMIT
from SA_Libs.NodesLib.color_table_node import create_color_table_node, render_color_table
from SA_Libs.NodesLib.image_import_node import create_image_import_node
from SA_Libs.NodesLib.spectrum_analysis_node import create_spectrum_analysis_node
from SA_Libs.PipelineLib.pipeline_runner import (
    PipelineExecutionError,
    execute_chain,
    get_chain_summary,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract the colors of an image and order them by approximate wavelength."
    )
    parser.add_argument("image", type=Path, help="Image file to analyse")
    parser.add_argument("--max-size", type=int, default=DEFAULT_MAX_IMAGE_SIZE,
                        help="Downscale so neither side exceeds this many pixels")
    parser.add_argument("--limit", type=int, default=DEFAULT_TABLE_LIMIT,
                        help="Number of table rows to print")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the flavor commentary")
    parser.add_argument("--json", action="store_true",
                        help="Print the full report as JSON instead of a table")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    chain = [
        create_image_import_node("import", args.image),
        create_spectrum_analysis_node("analysis", "import", max_size=args.max_size, seed=args.seed),
        create_color_table_node("table", "analysis", limit=args.limit),
    ]
    logger.debug(get_chain_summary(chain))

    try:
        results = execute_chain(chain)
    except PipelineExecutionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    report = results["analysis"]
    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        return 0

    print(report.commentary)
    if not report.is_empty:
        print()
        print(render_color_table(results["table"]))
        print()
        print(f"{report.distinct_count} distinct colors across {report.total_pixels} pixels")
    return 0


if __name__ == "__main__":
    sys.exit(main())
