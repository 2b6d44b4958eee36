"""
Expected Output Test Suite for Person Name Parsing

Expected field assignments of the person_names public API, pinned so that
refactoring the scan rules cannot silently change them.

Orderings covered:
- "title first middle last suffix" with late titles, initials and surname prefixes
- "title first middle last, suffix" with dotted professional suffixes
- "last [suffix], title first middle[, suffix...]" including the lone-title given name
- Parenthetical nicknames and conjunction-joined titles/given names
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

# Add the parent directory to path to import personname
sys.path.insert(0, str(Path(__file__).parent.parent))

from personname.person_names import parse_name

# (title, first, middle, last, suffix, nicknames)
Fields = Tuple[str, str, str, str, str, Tuple[str, ...]]


def _fields(full_name: str) -> Optional[Fields]:
    person = parse_name(full_name)
    if person is None:
        return None
    return (person.title, person.first, person.middle, person.last, person.suffix, person.nicknames)


# Test cases with expected (title, first, middle, last, suffix, nicknames)
PERSON_NAME_TEST_CASES = [
    ("Rev. Dr. Martin Luther King Jr.", ("Rev. Dr.", "Martin", "Luther", "King", "Jr.", ())),
    ("mrs jane q public", ("mrs", "jane", "q", "public", "", ())),
    ("Mr. john smith, esq", ("Mr.", "john", "", "smith", "esq", ())),
    ("johnson, john (johnny), iii", ("", "john", "", "johnson", "iii", ("johnny",))),
    ("Guido van Rossum", ("", "Guido", "", "van Rossum", "", ())),
    ("van Rossum, Guido", ("", "Guido", "", "van Rossum", "", ())),
    ("Johannes Diderik van der Waals", ("", "Johannes", "Diderik", "van der Waals", "", ())),
    ("Jean de la Fontaine", ("", "Jean", "", "de la Fontaine", "", ())),
    ("Jean Paul de la Fontaine", ("", "Jean", "Paul", "de la Fontaine", "", ())),
    ("john x smith", ("", "john", "x", "smith", "", ())),
    ("smith, john x", ("", "john", "x", "smith", "", ())),
    ("J. R. R. Tolkien", ("", "J.", "R. R.", "Tolkien", "", ())),
    ("Mr. Johnson", ("Mr.", "", "", "Johnson", "", ())),
    ("Marie Curie, Ph.D.", ("", "Marie", "", "Curie", "Ph.D.", ())),
    ("John Smith Jr. III", ("", "John", "", "Smith", "Jr. III", ())),
    ("John Smith, Jr., MD", ("", "John", "", "Smith", "Jr.", ())),
    ("Smith, John Jr.", ("", "John", "", "Smith", "Jr.", ())),
    ("Smith, John de Jr.", ("", "John", "de", "Smith", "Jr.", ())),
    ("Smith, John, Jr.", ("", "John", "", "Smith", "Jr.", ())),
    ("King Jr., Martin Luther", ("", "Martin", "Luther", "King", "Jr.", ())),
    ("Smith, Dr. John Q, Jr., Esq.", ("Dr.", "John", "Q", "Smith", "Jr. Esq.", ())),
    ("Doe, Jane (JJ) Ann, Jr. (Junior)", ("", "Jane", "Ann", "Doe", "Jr.", ("JJ", "Junior"))),
    ("John (Jack) Kennedy", ("", "John", "", "Kennedy", "", ("Jack",))),
    ("William (Bill) Henry (Hank) Gates", ("", "William", "Henry", "Gates", "", ("Bill", "Hank"))),
    ("(jimbo)", ("", "", "", "", "", ("jimbo",))),
    # Titles on their own or out of place
    ("Dr.", ("Dr.", "", "", "", "", ())),
    ("Sir", ("Sir", "", "", "", "", ())),
    ("John Dr Smith", ("", "John", "", "Dr Smith", "", ())),
    ("John Dr Smith, Jr.", ("Dr", "John", "", "Smith", "Jr.", ())),
    ("Mr. St. John", ("Mr.", "St.", "", "John", "", ())),
    # A lone title-like given name in surname-first form is kept as the first name
    ("Smith, Dr.", ("", "Dr.", "", "Smith", "", ())),
    # Single words without a title stay in the first name
    ("Smith", ("", "Smith", "", "", "", ())),
    ("Jr.", ("", "Jr.", "", "", "", ())),
    # Conjunctions
    ("John and Jane Smith", ("", "John and Jane", "", "Smith", "", ())),
    ("Mr. and Mrs. John Smith", ("Mr. and Mrs.", "Mr. and Mrs.", "John", "Smith", "", ())),
]

# Inputs with nothing to parse
UNPARSEABLE_TEST_CASES = ["", "   ", ",", ", ,", " ,\t, "]


def test_person_names_with_expected_results():
    """Test person names with their expected exact outputs."""
    failures = []

    for input_name, expected in PERSON_NAME_TEST_CASES:
        result = _fields(input_name)
        if result != expected:
            failures.append(f"'{input_name}': expected {expected}, got {result}")

    assert not failures, f"{len(failures)} of {len(PERSON_NAME_TEST_CASES)} names parsed differently:\n" + "\n".join(
        failures
    )


def test_unparseable_names_have_no_result():
    """Test that blank inputs produce no result."""
    for input_name in UNPARSEABLE_TEST_CASES:
        assert parse_name(input_name) is None, f"Expected no result for {input_name!r}"
