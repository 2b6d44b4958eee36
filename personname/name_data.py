# ═════════════════════════════════════════════════════════════════════════════════
# LEXICAL CATEGORY TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Four fixed categories drive the token classification in person_names:
# 1. TITLES: honorifics that precede a given name ("Dr." in "Dr. Martin Luther King, Jr.")
# 2. SUFFIXES: generational and professional qualifiers after a surname ("Jr.", "Ph.D.")
# 3. CONJUNCTIONS: tokens that join their neighbours ("Mr." "and" "Mrs." -> "Mr. and Mrs.")
# 4. PREFIXES: particles that belong to the surname ("van" in "Guido van Rossum")
#
# Entries are lowercase and carry no trailing periods. Suffix entries carry no periods at
# all since suffix lookup strips embedded periods ("Ph.D." -> "phd").
# ═════════════════════════════════════════════════════════════════════════════════

TITLES = frozenset(
    {
        "rev",
        "sir",
        "madam",
        "miss",
        "misses",
        "dr",
        "doctor",
        "mr",
        "mrs",
    }
)

SUFFIXES = frozenset(
    {
        # Generational
        "jr",
        "sr",
        "iii",
        "iv",
        # Professional
        "esq",
        "esquire",
        "rn",
        "lpn",
        "cpa",
        "md",
        "phd",
        "dds",
    }
)

# Matched verbatim against tokens: "John and Jane" -> "John and Jane" is saved as the first name
CONJUNCTIONS = frozenset({"&", "and", "y"})

PREFIXES = frozenset(
    {
        "de",
        "del",
        "du",
        "la",
        "der",
        "van",
        "st",
        "ste",
        "vel",
        "von",
    }
)


# ═════════════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═════════════════════════════════════════════════════════════════════════════════


def assert_normalized(table_name, table, strip_all_periods=False, case_sensitive=False):
    """Validate that every entry is a single token without the periods or capitals lookups strip."""
    for entry in table:
        if not entry or entry != entry.strip() or len(entry.split()) != 1:
            raise ValueError(f"Entry in {table_name} must be a single non-blank token: {entry!r}")
        if not case_sensitive and entry != entry.lower():
            raise ValueError(f"Entry in {table_name} must be lowercase: {entry!r}")
        if entry.endswith(".") or (strip_all_periods and "." in entry):
            raise ValueError(f"Entry in {table_name} must not contain periods: {entry!r}")


def assert_disjoint(*tables):
    """Validate that no entry belongs to more than one of the given categories."""
    seen = set()
    for table_name, table in tables:
        overlap = seen.intersection(table)
        if overlap:
            raise ValueError(f"Entries of {table_name} overlap another category: {sorted(overlap)}")
        seen.update(table)


assert_normalized("TITLES", TITLES)
assert_normalized("SUFFIXES", SUFFIXES, strip_all_periods=True)
assert_normalized("PREFIXES", PREFIXES)
assert_normalized("CONJUNCTIONS", CONJUNCTIONS, case_sensitive=True)

# Titles and prefixes stay disjoint from suffixes
assert_disjoint(("TITLES", TITLES), ("SUFFIXES", SUFFIXES))
assert_disjoint(("PREFIXES", PREFIXES), ("SUFFIXES", SUFFIXES))
