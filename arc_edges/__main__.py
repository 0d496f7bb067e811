import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from arc_edges import (
    ArcOptions,
    ArcVariant,
    InputValidationError,
    compute_arcs,
    generate_tikz_document,
    read_table,
    write_csv,
    write_json,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Turn graph edges into arc geometry")
    parser.add_argument("path", help="Path to the edge table (CSV or JSON)")
    parser.add_argument(
        "--input-format",
        choices=["csv", "json"],
        help="Input format (default: taken from the file suffix)",
    )
    parser.add_argument(
        "--variant",
        choices=[variant.value for variant in ArcVariant],
        default=ArcVariant.ARC.value,
        help="Arc variant: sampled (arc), endpoint pairs (arc2) or raw control points (arc0)",
    )
    parser.add_argument(
        "--curvature",
        type=float,
        default=1.0,
        help="Bend of linear arcs; 1 approximates a half circle (default: 1)",
    )
    parser.add_argument(
        "--fold",
        action="store_true",
        help="Force linear arcs onto the same side of the nodes",
    )
    parser.add_argument(
        "-n",
        type=int,
        default=100,
        help="Number of points sampled per arc (default: 100)",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "json", "tikz"],
        default="csv",
        help="Output format (default: csv)",
    )
    parser.add_argument(
        "--title",
        help="Title line for TikZ documents",
    )
    parser.add_argument(
        "--output",
        help="Write the result to this path instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        table = read_table(Path(args.path), args.input_format)
        options = ArcOptions(curvature=args.curvature, fold=args.fold, n=args.n)
        result = compute_arcs(table, args.variant, options)
    except InputValidationError as exc:
        logger.error("Invalid input: %s", exc)
        raise SystemExit(1) from exc

    logger.info("Computed %s arcs: %d row(s)", args.variant, len(result["x"]))

    out = sys.stdout
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing %s output to %s", args.format, output_path)
        out = open(output_path, "w", newline="", encoding="utf-8")
    try:
        if args.format == "csv":
            write_csv(result, out)
        elif args.format == "json":
            write_json(result, out)
        else:
            out.write(generate_tikz_document(result, args.variant, title=args.title))
    finally:
        if out is not sys.stdout:
            out.close()


if __name__ == "__main__":
    main(sys.argv[1:])
