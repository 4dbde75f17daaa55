"""
Build-time generator of the integer pair table.

The runtime never derives intermediate or Length types itself: it reads
`scalar_measure/domain/pair_table.py`, which this module renders. Every entry
is derived from the rules below and verified before it is emitted:

    both operands unsigned:
        intermediate = the wider operand type
        length       = the unsigned type twice as wide as the wider operand
    otherwise:
        intermediate = the signed type twice as wide as the wider operand
        length       = the narrowest unsigned type holding
                       max(a.max - b.min, b.max - a.min)
"""

import importlib
import itertools
from dataclasses import dataclass
from pathlib import Path

from scalar_measure.domain.constants import LENGTH_WIDTHS, SUPPORTED_POINTER_WIDTHS
from scalar_measure.domain.exceptions import MeasureOverflowError
from scalar_measure.domain.models.domains import (
    FIXED_INTEGER_TYPES,
    IntegerType,
    native_integer,
    signed,
    unsigned,
)
from scalar_measure.logging_config import get_logger

logger = get_logger(__name__)

PAIR_TABLE_MODULE = "scalar_measure.domain.pair_table"
PAIR_TABLE_PATH = Path(__file__).resolve().parent.parent / "domain" / "pair_table.py"

PairTable = dict[tuple[str, str], tuple[str, str]]


@dataclass(frozen=True, slots=True)
class PairEntry:
    first: IntegerType
    second: IntegerType
    intermediate: IntegerType
    length: IntegerType

    @property
    def key(self) -> tuple[str, str]:
        return (self.first.name, self.second.name)

    @property
    def value(self) -> tuple[str, str]:
        return (self.intermediate.name, self.length.name)


def greatest_distance(first: IntegerType, second: IntegerType) -> int:
    """Largest possible |a - b| with a in first and b in second."""
    return max(
        first.max_value - second.min_value, second.max_value - first.min_value
    )


def derive_intermediate(first: IntegerType, second: IntegerType) -> IntegerType:
    widest = max(first.bits, second.bits)
    if not first.signed and not second.signed:
        # Ordered subtraction of two unsigned values never leaves the wider type
        return unsigned(widest)
    return signed(2 * widest)


def derive_length(first: IntegerType, second: IntegerType) -> IntegerType:
    widest = max(first.bits, second.bits)
    if not first.signed and not second.signed:
        return unsigned(2 * widest)

    span = greatest_distance(first, second)
    for bits in LENGTH_WIDTHS:
        if unsigned(bits).max_value >= span:
            return unsigned(bits)
    raise MeasureOverflowError(
        f"No length type holds the distance between {first.name} and {second.name}"
    )


def verify_pair_entry(entry: PairEntry) -> None:
    """Check that an entry can neither overflow nor wrap.

    Raises:
        MeasureOverflowError: If the intermediate cannot hold an operand or its
            difference, or the length cannot hold the greatest distance
    """
    first, second, intermediate = entry.first, entry.second, entry.intermediate
    for operand in (first, second):
        if not (
            intermediate.contains(operand.min_value)
            and intermediate.contains(operand.max_value)
        ):
            raise MeasureOverflowError(
                f"{intermediate.name} cannot hold {operand.name} for {entry.key}"
            )

    span = greatest_distance(first, second)
    if not intermediate.contains(span):
        raise MeasureOverflowError(
            f"{intermediate.name} cannot hold the difference for {entry.key}"
        )
    if not entry.length.contains(span):
        raise MeasureOverflowError(
            f"{entry.length.name} cannot hold the distance for {entry.key}"
        )


def derive_pair_entry(first: IntegerType, second: IntegerType) -> PairEntry:
    entry = PairEntry(
        first=first,
        second=second,
        intermediate=derive_intermediate(first, second),
        length=derive_length(first, second),
    )
    verify_pair_entry(entry)
    return entry


def derive_fixed_pairs() -> PairTable:
    """Entries for every ordered pair of fixed-width integer types."""
    table: PairTable = {}
    for first, second in itertools.product(FIXED_INTEGER_TYPES, repeat=2):
        entry = derive_pair_entry(first, second)
        table[entry.key] = entry.value
    return table


def derive_native_pairs(pointer_width: int) -> PairTable:
    """Entries for every ordered pair involving usize or isize."""
    natives = (native_integer(False, pointer_width), native_integer(True, pointer_width))
    table: PairTable = {}
    for first, second in itertools.product(natives + FIXED_INTEGER_TYPES, repeat=2):
        if first.native or second.native:
            entry = derive_pair_entry(first, second)
            table[entry.key] = entry.value
    return table


def derive_pair_table() -> tuple[PairTable, dict[int, PairTable]]:
    fixed = derive_fixed_pairs()
    native = {width: derive_native_pairs(width) for width in SUPPORTED_POINTER_WIDTHS}
    logger.debug(
        f"Derived {len(fixed)} fixed and "
        f"{sum(len(t) for t in native.values())} native pair entries"
    )
    return fixed, native


def _render_entries(table: PairTable, indent: str) -> list[str]:
    return [
        f'{indent}("{a}", "{b}"): ("{cast}", "{length}"),'
        for (a, b), (cast, length) in table.items()
    ]


def render_pair_table() -> str:
    """Render the pair table as the source of the generated module."""
    fixed, native = derive_pair_table()

    lines = [
        "# Generated by `scalar-measure generate`. Do not edit by hand.",
        '"""Intermediate and Length types for every ordered pair of integer domains."""',
        "",
        "# (first, second): (intermediate, length)",
        "FIXED_PAIRS: dict[tuple[str, str], tuple[str, str]] = {",
        *_render_entries(fixed, "    "),
        "}",
        "",
        "# pointer width -> (first, second): (intermediate, length)",
        "NATIVE_PAIRS: dict[int, dict[tuple[str, str], tuple[str, str]]] = {",
    ]
    for width, table in native.items():
        lines.append(f"    {width}: {{")
        lines.extend(_render_entries(table, "        "))
        lines.append("    },")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_pair_table(path: Path = PAIR_TABLE_PATH) -> Path:
    path = Path(path)
    path.write_text(render_pair_table(), encoding="utf-8")
    logger.info(f"Pair table written to {path}")
    return path


def check_pair_table() -> list[str]:
    """Compare the committed pair table against a fresh derivation.

    Returns:
        One message per mismatching, missing or unexpected entry; empty when
        the committed table is up to date.
    """
    committed = importlib.import_module(PAIR_TABLE_MODULE)
    fixed, native = derive_pair_table()

    problems = _diff_tables("fixed", committed.FIXED_PAIRS, fixed)
    for width in sorted(set(native) | set(committed.NATIVE_PAIRS)):
        problems += _diff_tables(
            f"native/{width}",
            committed.NATIVE_PAIRS.get(width, {}),
            native.get(width, {}),
        )
    return problems


def _diff_tables(label: str, committed: PairTable, derived: PairTable) -> list[str]:
    problems = []
    for key in derived.keys() - committed.keys():
        problems.append(f"{label}: missing entry {key}")
    for key in committed.keys() - derived.keys():
        problems.append(f"{label}: unexpected entry {key}")
    for key in derived.keys() & committed.keys():
        if derived[key] != committed[key]:
            problems.append(
                f"{label}: {key} is {committed[key]}, expected {derived[key]}"
            )
    return sorted(problems)
