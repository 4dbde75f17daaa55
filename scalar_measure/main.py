import argparse
import sys

from environs import Env

from scalar_measure.application.registry import MeasureRegistry
from scalar_measure.config import load_settings
from scalar_measure.domain.exceptions import MeasureException
from scalar_measure.domain.models.domains import CharType, Domain, FloatType
from scalar_measure.domain.models.result import MeasureResult
from scalar_measure.infrastructure.codegen import check_pair_table, write_pair_table
from scalar_measure.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    format_pair_table,
)
from scalar_measure.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def parse_value(domain: Domain, text: str):
    """Parse a command line operand for the given domain.

    Integers accept Python literals ("-5", "0xff"), floats accept "inf" and
    "nan", characters are given literally or as U+XXXX.
    """
    if isinstance(domain, CharType):
        if text[:2].upper() == "U+" and len(text) > 2:
            return chr(int(text[2:], 16))
        return text
    if isinstance(domain, FloatType):
        return float(text)
    try:
        return int(text, 0)
    except ValueError:
        raise ValueError(f"{domain.name} operand must be an integer, got {text!r}")


def run_distance(registry: MeasureRegistry, args: argparse.Namespace) -> MeasureResult:
    if len(args.operands) == 3:
        domain, a, b = args.operands
        other_domain = None
    elif len(args.operands) == 4:
        domain, other_domain, a, b = args.operands
    else:
        raise ValueError("Usage: distance <domain> [<other-domain>] <a> <b>")

    measure = registry.measure_for(domain, other_domain)
    value = parse_value(measure.domain, a)
    other = parse_value(measure.other_domain, b)
    return MeasureResult(
        operation="distance",
        domains=(measure.domain.name, measure.other_domain.name),
        operands=(value, other),
        value=measure.distance(value, other),
        length_type=measure.length_type.name,
    )


def run_len(registry: MeasureRegistry, args: argparse.Namespace) -> MeasureResult:
    measure = registry.measure_for(args.domain)
    value = parse_value(measure.domain, args.value)
    return MeasureResult(
        operation="len",
        domains=(measure.domain.name,),
        operands=(value,),
        value=measure.len(value),
        length_type=measure.length_type.name,
    )


def run_table(registry: MeasureRegistry) -> str:
    rows = [
        (m.domain.name, m.other_domain.name, m.intermediate.name, m.length.name)
        for m in registry.integral_measures()
    ]
    return format_pair_table(rows)


def run_generate(args: argparse.Namespace) -> int:
    if args.check:
        problems = check_pair_table()
        for problem in problems:
            print(problem)
        if problems:
            print(f"Pair table is out of date ({len(problems)} problem(s))")
            return 1
        print("Pair table is up to date")
        return 0

    path = write_pair_table(args.output) if args.output else write_pair_table()
    print(f"Pair table written to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scalar-measure",
        description="Distance and length over scalar domains",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print distance/len results as JSON",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    distance_parser = subparsers.add_parser(
        "distance",
        help="Distance between two values",
        description="Use -- before operands such as -inf that look like options.",
    )
    distance_parser.add_argument(
        "operands",
        nargs="+",
        metavar="ARG",
        help="<domain> [<other-domain>] <a> <b>",
    )

    len_parser = subparsers.add_parser("len", help="Length of a single value")
    len_parser.add_argument("domain")
    len_parser.add_argument("value")

    table_parser = subparsers.add_parser("table", help="Print the integer pair table")
    table_parser.add_argument(
        "--pointer-width",
        type=int,
        default=None,
        help="Pointer width for usize/isize (default: configured width)",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Regenerate the integer pair table module"
    )
    generate_parser.add_argument("--output", default=None, help="Target file")
    generate_parser.add_argument(
        "--check",
        action="store_true",
        help="Verify the committed table instead of writing it",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load environment variables as early as possible within main()
    env = Env()
    env.read_env(".env")

    setup_logging(env)

    try:
        if args.command == "generate":
            return run_generate(args)

        settings = load_settings(env)
        pointer_width = settings.pointer_width
        if args.command == "table" and args.pointer_width is not None:
            pointer_width = args.pointer_width
        registry = MeasureRegistry(pointer_width)
        logger.debug(f"Using pointer width {registry.pointer_width}")

        if args.command == "table":
            print(run_table(registry))
            return 0

        if args.command == "distance":
            result = run_distance(registry, args)
        else:
            result = run_len(registry, args)

        if args.json:
            print(JSONOutputFormatter().format_result(result))
        else:
            ConsoleOutputFormatter().format_result(result)
        return 0

    except (MeasureException, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
