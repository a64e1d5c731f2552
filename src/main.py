"""
Easel Layout - command line entry point.

Computes print size, borders and easel blade readings for darkroom prints,
suggests quarter-inch friendly borders and exports blade charts.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from config.layout_constants import DEFAULTS
from config.paper_catalog import ASPECT_RATIOS, CUSTOM_KEY, PAPER_SIZES
from processing import EASEL_CATALOG, QuarterInchStatus, classify_paper_size
from services.export import ExportWriter, build_blade_chart
from services.layout_service import BorderLayoutService, BorderSettings, LayoutInputError
from utils.env import get_log_level, is_dev_mode
from utils.error_handling import format_error_message, log_exception
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_RESULT = 1
EXIT_INPUT_ERROR = 2


def _parse_size(text: str) -> tuple[float, float]:
    parts = text.lower().replace("×", "x").split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got '{text}'")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got '{text}'") from None


def _parse_list(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def _parse_float_list(text: str) -> list[float]:
    try:
        return [float(item) for item in _parse_list(text)]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma separated numbers, got '{text}'") from None


def _add_settings_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--paper", default="8x10", help="Paper size key, or 'custom'.")
    parser.add_argument(
        "--custom-paper",
        type=_parse_size,
        metavar="WxH",
        help="Custom paper size in inches (implies --paper custom).",
    )
    parser.add_argument("--ratio", default="3:2", help="Aspect ratio key, 'even-borders' or 'custom'.")
    parser.add_argument(
        "--custom-ratio",
        type=_parse_size,
        metavar="WxH",
        help="Custom aspect ratio (implies --ratio custom).",
    )
    parser.add_argument("--border", type=float, default=DEFAULTS.min_border, help="Minimum border in inches.")
    parser.add_argument("--offset-h", type=float, default=0.0, help="Horizontal print offset in inches.")
    parser.add_argument("--offset-v", type=float, default=0.0, help="Vertical print offset in inches.")
    parser.add_argument(
        "--ignore-min-border",
        action="store_true",
        help="Let offsets eat into the minimum border (print still stays on paper).",
    )
    parser.add_argument("--portrait", action="store_true", help="Use portrait paper orientation.")
    parser.add_argument("--flip-ratio", action="store_true", help="Swap the aspect ratio's width and height.")


def _settings_from_args(args: argparse.Namespace) -> BorderSettings:
    settings = BorderSettings(
        paper_size=args.paper,
        aspect_ratio=args.ratio,
        min_border=args.border,
        enable_offset=bool(args.offset_h or args.offset_v),
        ignore_min_border=args.ignore_min_border,
        horizontal_offset=args.offset_h,
        vertical_offset=args.offset_v,
        is_landscape=not args.portrait,
        is_ratio_flipped=args.flip_ratio,
    )
    if args.custom_paper:
        settings.paper_size = CUSTOM_KEY
        settings.custom_paper_width, settings.custom_paper_height = args.custom_paper
    if args.custom_ratio:
        settings.aspect_ratio = CUSTOM_KEY
        settings.custom_aspect_width, settings.custom_aspect_height = args.custom_ratio
    return settings


def cmd_layout(args: argparse.Namespace) -> int:
    calc = BorderLayoutService().calculate(_settings_from_args(args))

    for warning in calc.warnings:
        print(f"! {warning}")

    if not calc.is_feasible:
        print("No valid layout: the border leaves no room for a print.")
        return EXIT_NO_RESULT

    print(f"Paper:  {calc.paper_width:g} x {calc.paper_height:g} in")
    print(f"Print:  {calc.print_width:.2f} x {calc.print_height:.2f} in")
    print(
        "Borders: "
        + "  ".join(f"{side} {value:.2f}" for side, value in calc.borders().items())
    )
    print(
        "Blades:  "
        + "  ".join(f"{side} {value:.2f}" for side, value in calc.blade_readings().items())
    )
    kind = "non-standard" if calc.is_non_standard_paper_size else "standard"
    print(f"Easel:  {calc.easel_size_label} ({kind})")
    return EXIT_OK


def cmd_snap(args: argparse.Namespace) -> int:
    service = BorderLayoutService()
    settings = _settings_from_args(args)
    result = service.snap_to_quarter_inch(settings)

    if result.status == QuarterInchStatus.FOUND:
        print(
            f"Use a {result.min_border:.3f} in minimum border for a "
            f"{result.print_width:.2f} x {result.print_height:.2f} in print."
        )
        return EXIT_OK
    if result.status == QuarterInchStatus.ALREADY_ALIGNED:
        print("Print size already falls on quarter inches.")
        return EXIT_OK
    if result.status == QuarterInchStatus.NO_SOLUTION:
        optimal = service.optimal_min_border(settings)
        print(f"No quarter-inch print size found. Closest quarter-inch borders at {optimal:.2f} in.")
        return EXIT_NO_RESULT

    print("No valid layout to search from.")
    return EXIT_NO_RESULT


def cmd_classify(args: argparse.Namespace) -> int:
    width, height = args.size
    result = classify_paper_size(width, height)
    kind = "standard" if result.is_standard else "non-standard"
    print(f"{width:g} x {height:g} in: {kind}")
    print(f"Slot:  {result.slot.label} ({result.slot_width:g} x {result.slot_height:g} in)")
    if not result.is_standard:
        print(result.label)
    return EXIT_OK


def cmd_chart(args: argparse.Namespace) -> int:
    df = build_blade_chart(
        paper_keys=args.papers,
        ratio_keys=args.ratios,
        min_borders=args.borders,
        landscape=not args.portrait,
    )
    for error in df.attrs.get("errors", []):
        print(f"! {error}")

    if df.empty:
        print("No valid layouts for the requested combinations.")
        return EXIT_NO_RESULT

    if args.output is None:
        print(df.to_string(index=False))
        return EXIT_OK

    path = ExportWriter().write_dataset(df, args.output, args.format)
    print(f"Wrote {len(df)} rows to {path}")
    return EXIT_OK


def cmd_sizes(args: argparse.Namespace) -> int:
    print("Paper sizes:")
    for paper in PAPER_SIZES:
        print(f"  {paper.key:<14} {paper.label}")
    print("Aspect ratios:")
    for ratio in ASPECT_RATIOS:
        print(f"  {ratio.key:<14} {ratio.label}")
    print("Easel slots:")
    for slot in EASEL_CATALOG.slots:
        print(f"  {slot.label:<14} {slot.width:g} x {slot.height:g} in")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="easel-layout",
        description="Darkroom print borders and easel blade readings.",
    )
    subparsers = parser.add_subparsers(dest="command")

    layout_parser = subparsers.add_parser("layout", help="Compute borders and blade readings.")
    _add_settings_arguments(layout_parser)
    layout_parser.set_defaults(func=cmd_layout)

    snap_parser = subparsers.add_parser("snap", help="Suggest a quarter-inch friendly minimum border.")
    _add_settings_arguments(snap_parser)
    snap_parser.set_defaults(func=cmd_snap)

    classify_parser = subparsers.add_parser("classify", help="Match a paper size to an easel slot.")
    classify_parser.add_argument("size", type=_parse_size, metavar="WxH")
    classify_parser.set_defaults(func=cmd_classify)

    chart_parser = subparsers.add_parser("chart", help="Tabulate blade settings.")
    chart_parser.add_argument("--papers", type=_parse_list, help="Comma separated paper keys (default: all).")
    chart_parser.add_argument("--ratios", type=_parse_list, help="Comma separated ratio keys (default: all).")
    chart_parser.add_argument(
        "--borders",
        type=_parse_float_list,
        default=[DEFAULTS.min_border],
        help="Comma separated minimum borders in inches.",
    )
    chart_parser.add_argument("--portrait", action="store_true", help="Use portrait paper orientation.")
    chart_parser.add_argument("--output", type=Path, help="CSV or .xlsx file to write.")
    chart_parser.add_argument("--format", choices=["csv", "excel"], help="Override format inferred from --output.")
    chart_parser.set_defaults(func=cmd_chart)

    sizes_parser = subparsers.add_parser("sizes", help="List paper sizes, ratios and easel slots.")
    sizes_parser.set_defaults(func=cmd_sizes)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return EXIT_INPUT_ERROR

    setup_logging(level=get_log_level(), console=is_dev_mode())

    try:
        return args.func(args)
    except LayoutInputError as exc:
        print(format_error_message(exc, "Invalid settings", include_type=False), file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ValueError as exc:
        log_exception(exc, f"{args.command} failed")
        print(format_error_message(exc, f"{args.command} failed"), file=sys.stderr)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
