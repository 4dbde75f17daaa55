# Generated by `scalar-measure generate`. Do not edit by hand.
"""Intermediate and Length types for every ordered pair of integer domains."""

# (first, second): (intermediate, length)
FIXED_PAIRS: dict[tuple[str, str], tuple[str, str]] = {
    ("u8", "u8"): ("u8", "u16"),
    ("u8", "u16"): ("u16", "u32"),
    ("u8", "u32"): ("u32", "u64"),
    ("u8", "u64"): ("u64", "u128"),
    ("u8", "i8"): ("i16", "u16"),
    ("u8", "i16"): ("i32", "u16"),
    ("u8", "i32"): ("i64", "u32"),
    ("u8", "i64"): ("i128", "u64"),
    ("u16", "u8"): ("u16", "u32"),
    ("u16", "u16"): ("u16", "u32"),
    ("u16", "u32"): ("u32", "u64"),
    ("u16", "u64"): ("u64", "u128"),
    ("u16", "i8"): ("i32", "u32"),
    ("u16", "i16"): ("i32", "u32"),
    ("u16", "i32"): ("i64", "u32"),
    ("u16", "i64"): ("i128", "u64"),
    ("u32", "u8"): ("u32", "u64"),
    ("u32", "u16"): ("u32", "u64"),
    ("u32", "u32"): ("u32", "u64"),
    ("u32", "u64"): ("u64", "u128"),
    ("u32", "i8"): ("i64", "u64"),
    ("u32", "i16"): ("i64", "u64"),
    ("u32", "i32"): ("i64", "u64"),
    ("u32", "i64"): ("i128", "u64"),
    ("u64", "u8"): ("u64", "u128"),
    ("u64", "u16"): ("u64", "u128"),
    ("u64", "u32"): ("u64", "u128"),
    ("u64", "u64"): ("u64", "u128"),
    ("u64", "i8"): ("i128", "u128"),
    ("u64", "i16"): ("i128", "u128"),
    ("u64", "i32"): ("i128", "u128"),
    ("u64", "i64"): ("i128", "u128"),
    ("i8", "u8"): ("i16", "u16"),
    ("i8", "u16"): ("i32", "u32"),
    ("i8", "u32"): ("i64", "u64"),
    ("i8", "u64"): ("i128", "u128"),
    ("i8", "i8"): ("i16", "u8"),
    ("i8", "i16"): ("i32", "u16"),
    ("i8", "i32"): ("i64", "u32"),
    ("i8", "i64"): ("i128", "u64"),
    ("i16", "u8"): ("i32", "u16"),
    ("i16", "u16"): ("i32", "u32"),
    ("i16", "u32"): ("i64", "u64"),
    ("i16", "u64"): ("i128", "u128"),
    ("i16", "i8"): ("i32", "u16"),
    ("i16", "i16"): ("i32", "u16"),
    ("i16", "i32"): ("i64", "u32"),
    ("i16", "i64"): ("i128", "u64"),
    ("i32", "u8"): ("i64", "u32"),
    ("i32", "u16"): ("i64", "u32"),
    ("i32", "u32"): ("i64", "u64"),
    ("i32", "u64"): ("i128", "u128"),
    ("i32", "i8"): ("i64", "u32"),
    ("i32", "i16"): ("i64", "u32"),
    ("i32", "i32"): ("i64", "u32"),
    ("i32", "i64"): ("i128", "u64"),
    ("i64", "u8"): ("i128", "u64"),
    ("i64", "u16"): ("i128", "u64"),
    ("i64", "u32"): ("i128", "u64"),
    ("i64", "u64"): ("i128", "u128"),
    ("i64", "i8"): ("i128", "u64"),
    ("i64", "i16"): ("i128", "u64"),
    ("i64", "i32"): ("i128", "u64"),
    ("i64", "i64"): ("i128", "u64"),
}

# pointer width -> (first, second): (intermediate, length)
NATIVE_PAIRS: dict[int, dict[tuple[str, str], tuple[str, str]]] = {
    8: {
        ("usize", "usize"): ("u8", "u16"),
        ("usize", "isize"): ("i16", "u16"),
        ("usize", "u8"): ("u8", "u16"),
        ("usize", "u16"): ("u16", "u32"),
        ("usize", "u32"): ("u32", "u64"),
        ("usize", "u64"): ("u64", "u128"),
        ("usize", "i8"): ("i16", "u16"),
        ("usize", "i16"): ("i32", "u16"),
        ("usize", "i32"): ("i64", "u32"),
        ("usize", "i64"): ("i128", "u64"),
        ("isize", "usize"): ("i16", "u16"),
        ("isize", "isize"): ("i16", "u8"),
        ("isize", "u8"): ("i16", "u16"),
        ("isize", "u16"): ("i32", "u32"),
        ("isize", "u32"): ("i64", "u64"),
        ("isize", "u64"): ("i128", "u128"),
        ("isize", "i8"): ("i16", "u8"),
        ("isize", "i16"): ("i32", "u16"),
        ("isize", "i32"): ("i64", "u32"),
        ("isize", "i64"): ("i128", "u64"),
        ("u8", "usize"): ("u8", "u16"),
        ("u8", "isize"): ("i16", "u16"),
        ("u16", "usize"): ("u16", "u32"),
        ("u16", "isize"): ("i32", "u32"),
        ("u32", "usize"): ("u32", "u64"),
        ("u32", "isize"): ("i64", "u64"),
        ("u64", "usize"): ("u64", "u128"),
        ("u64", "isize"): ("i128", "u128"),
        ("i8", "usize"): ("i16", "u16"),
        ("i8", "isize"): ("i16", "u8"),
        ("i16", "usize"): ("i32", "u16"),
        ("i16", "isize"): ("i32", "u16"),
        ("i32", "usize"): ("i64", "u32"),
        ("i32", "isize"): ("i64", "u32"),
        ("i64", "usize"): ("i128", "u64"),
        ("i64", "isize"): ("i128", "u64"),
    },
    16: {
        ("usize", "usize"): ("u16", "u32"),
        ("usize", "isize"): ("i32", "u32"),
        ("usize", "u8"): ("u16", "u32"),
        ("usize", "u16"): ("u16", "u32"),
        ("usize", "u32"): ("u32", "u64"),
        ("usize", "u64"): ("u64", "u128"),
        ("usize", "i8"): ("i32", "u32"),
        ("usize", "i16"): ("i32", "u32"),
        ("usize", "i32"): ("i64", "u32"),
        ("usize", "i64"): ("i128", "u64"),
        ("isize", "usize"): ("i32", "u32"),
        ("isize", "isize"): ("i32", "u16"),
        ("isize", "u8"): ("i32", "u16"),
        ("isize", "u16"): ("i32", "u32"),
        ("isize", "u32"): ("i64", "u64"),
        ("isize", "u64"): ("i128", "u128"),
        ("isize", "i8"): ("i32", "u16"),
        ("isize", "i16"): ("i32", "u16"),
        ("isize", "i32"): ("i64", "u32"),
        ("isize", "i64"): ("i128", "u64"),
        ("u8", "usize"): ("u16", "u32"),
        ("u8", "isize"): ("i32", "u16"),
        ("u16", "usize"): ("u16", "u32"),
        ("u16", "isize"): ("i32", "u32"),
        ("u32", "usize"): ("u32", "u64"),
        ("u32", "isize"): ("i64", "u64"),
        ("u64", "usize"): ("u64", "u128"),
        ("u64", "isize"): ("i128", "u128"),
        ("i8", "usize"): ("i32", "u32"),
        ("i8", "isize"): ("i32", "u16"),
        ("i16", "usize"): ("i32", "u32"),
        ("i16", "isize"): ("i32", "u16"),
        ("i32", "usize"): ("i64", "u32"),
        ("i32", "isize"): ("i64", "u32"),
        ("i64", "usize"): ("i128", "u64"),
        ("i64", "isize"): ("i128", "u64"),
    },
    32: {
        ("usize", "usize"): ("u32", "u64"),
        ("usize", "isize"): ("i64", "u64"),
        ("usize", "u8"): ("u32", "u64"),
        ("usize", "u16"): ("u32", "u64"),
        ("usize", "u32"): ("u32", "u64"),
        ("usize", "u64"): ("u64", "u128"),
        ("usize", "i8"): ("i64", "u64"),
        ("usize", "i16"): ("i64", "u64"),
        ("usize", "i32"): ("i64", "u64"),
        ("usize", "i64"): ("i128", "u64"),
        ("isize", "usize"): ("i64", "u64"),
        ("isize", "isize"): ("i64", "u32"),
        ("isize", "u8"): ("i64", "u32"),
        ("isize", "u16"): ("i64", "u32"),
        ("isize", "u32"): ("i64", "u64"),
        ("isize", "u64"): ("i128", "u128"),
        ("isize", "i8"): ("i64", "u32"),
        ("isize", "i16"): ("i64", "u32"),
        ("isize", "i32"): ("i64", "u32"),
        ("isize", "i64"): ("i128", "u64"),
        ("u8", "usize"): ("u32", "u64"),
        ("u8", "isize"): ("i64", "u32"),
        ("u16", "usize"): ("u32", "u64"),
        ("u16", "isize"): ("i64", "u32"),
        ("u32", "usize"): ("u32", "u64"),
        ("u32", "isize"): ("i64", "u64"),
        ("u64", "usize"): ("u64", "u128"),
        ("u64", "isize"): ("i128", "u128"),
        ("i8", "usize"): ("i64", "u64"),
        ("i8", "isize"): ("i64", "u32"),
        ("i16", "usize"): ("i64", "u64"),
        ("i16", "isize"): ("i64", "u32"),
        ("i32", "usize"): ("i64", "u64"),
        ("i32", "isize"): ("i64", "u32"),
        ("i64", "usize"): ("i128", "u64"),
        ("i64", "isize"): ("i128", "u64"),
    },
    64: {
        ("usize", "usize"): ("u64", "u128"),
        ("usize", "isize"): ("i128", "u128"),
        ("usize", "u8"): ("u64", "u128"),
        ("usize", "u16"): ("u64", "u128"),
        ("usize", "u32"): ("u64", "u128"),
        ("usize", "u64"): ("u64", "u128"),
        ("usize", "i8"): ("i128", "u128"),
        ("usize", "i16"): ("i128", "u128"),
        ("usize", "i32"): ("i128", "u128"),
        ("usize", "i64"): ("i128", "u128"),
        ("isize", "usize"): ("i128", "u128"),
        ("isize", "isize"): ("i128", "u64"),
        ("isize", "u8"): ("i128", "u64"),
        ("isize", "u16"): ("i128", "u64"),
        ("isize", "u32"): ("i128", "u64"),
        ("isize", "u64"): ("i128", "u128"),
        ("isize", "i8"): ("i128", "u64"),
        ("isize", "i16"): ("i128", "u64"),
        ("isize", "i32"): ("i128", "u64"),
        ("isize", "i64"): ("i128", "u64"),
        ("u8", "usize"): ("u64", "u128"),
        ("u8", "isize"): ("i128", "u64"),
        ("u16", "usize"): ("u64", "u128"),
        ("u16", "isize"): ("i128", "u64"),
        ("u32", "usize"): ("u64", "u128"),
        ("u32", "isize"): ("i128", "u64"),
        ("u64", "usize"): ("u64", "u128"),
        ("u64", "isize"): ("i128", "u128"),
        ("i8", "usize"): ("i128", "u128"),
        ("i8", "isize"): ("i128", "u64"),
        ("i16", "usize"): ("i128", "u128"),
        ("i16", "isize"): ("i128", "u64"),
        ("i32", "usize"): ("i128", "u128"),
        ("i32", "isize"): ("i128", "u64"),
        ("i64", "usize"): ("i128", "u128"),
        ("i64", "isize"): ("i128", "u64"),
    },
}
