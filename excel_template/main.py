#!/usr/bin/env python
"""
Excel Template Renderer – CLI entry point.

Usage:
    # Render a template with a JSON or YAML data model
    python -m excel_template.main render <template.xlsx> <data.json> [--output out.xlsx] [--sheets Sheet1 Sheet2]

    # Take defaults from a config file
    python -m excel_template.main render <template.xlsx> <data.yaml> --config config.yaml
"""

import argparse
import logging
import os
import sys

from excel_template.errors import ModelLoadError
from excel_template.loader import load_config, load_model
from excel_template.renderer import render_workbook

logger = logging.getLogger(__name__)


def setup_logging(level_str: str = "INFO"):
    """Configure logging."""
    level = getattr(logging, level_str.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def _build_parser():
    parser = argparse.ArgumentParser(
        description="Fill an Excel template with data: $F{field} and $Each{items} markers"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_render = sub.add_parser(
        "render",
        help="Apply a data model to a template workbook",
    )
    p_render.add_argument("template_file", help="Path to the template workbook (.xlsx)")
    p_render.add_argument("data_file", help="Path to the data model (.json, .yaml)")
    p_render.add_argument(
        "--output", default=None,
        help="Output path (default: <output_dir or template dir/output>/<name>_rendered.xlsx)",
    )
    p_render.add_argument(
        "--sheets", nargs="*", default=None,
        help="Sheet names to render (default: all sheets)",
    )
    p_render.add_argument("--config", default=None, help="Path to config YAML file")
    p_render.add_argument(
        "--log-level", default=None,
        help="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    return parser


def _render(args):
    config = load_config(args.config)
    setup_logging(args.log_level or config["log_level"])

    if not os.path.exists(args.template_file):
        logger.error(f"Template file not found: {args.template_file}")
        return 1

    try:
        model = load_model(args.data_file)
    except ModelLoadError as e:
        logger.error(f"Could not load data model: {e}")
        return 1

    output = args.output
    if output is None and config["output_dir"]:
        stem = os.path.splitext(os.path.basename(args.template_file))[0]
        output = os.path.join(config["output_dir"], f"{stem}_rendered.xlsx")

    sheets = args.sheets if args.sheets is not None else config["sheets"]

    logger.info(f"Template: {args.template_file}")
    logger.info(f"Data model: {args.data_file}")
    render_workbook(args.template_file, model, output_path=output, sheet_names=sheets)
    return 0


def main(argv=None):
    args = _build_parser().parse_args(argv)
    if args.command == "render":
        return _render(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
