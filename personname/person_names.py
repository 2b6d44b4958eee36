"""
Western Personal Name Parsing Module

This module splits a free-form full name, as typed into forms, documents or contact lists,
into its structured components: title, first name, middle name(s), last name, suffix and
nicknames.

## Overview

The core functionality is provided by the `PersonNameParser` class, which runs a single-pass
pipeline over the input:

1. **Nickname Extraction**: Removes parenthetical spans ("John (Jack) Kennedy") and keeps them in order
2. **Segmentation**: Splits the remainder on commas into trimmed, non-empty segments
3. **Conjunction Joining**: Merges "Mr. and Mrs." or "John & Jane" into single compound tokens
4. **Field Assignment**: Assigns every token to a field by lexical category and position
5. **Postprocessing**: Moves a lone given name to the surname after a title ("Mr. Johnson")

## Supported Orderings

- `title first middle... last suffix` ("Rev. Dr. Martin Luther King Jr.")
- `title first middle... last, suffix` ("Marie Curie, Ph.D.")
- `last [suffix], title first middle...[, suffix...]` ("King Jr., Martin Luther", "johnson, john, iii")

Surname prefixes keep compound surnames together ("Guido van Rossum" -> last "van Rossum").

## Usage Examples

```python
from personname.person_names import parse_name

person = parse_name("Rev. Dr. Martin Luther King Jr.")
# PersonName(title='Rev. Dr.', first='Martin', middle='Luther', last='King', suffix='Jr.', nicknames=())

person = parse_name("(jimbo)")
# PersonName(title='', first='', middle='', last='', suffix='', nicknames=('jimbo',))

parse_name(" , ")
# None: nothing to parse

# Custom category tables
from personname.person_names import NameParserConfig, PersonNameParser

config = NameParserConfig.create_default().with_titles({"mr", "mrs", "prof", "capt"})
result = PersonNameParser(config).parse("Prof. Ada Lovelace")
# ParseResult(success=True, person=PersonName(title='Prof.', first='Ada', ...), error_message=None)
```

## Error Handling

Parsing is total: any input with content yields a best-effort `PersonName`. The only failure is
input with neither name content nor nicknames, reported as `ParseResult.failure(...)` by the
parser and as `None` by the module-level `parse_name`. Invalid category tables raise
`ValueError` when the configuration is built.

## Thread Safety

Configuration and category tables are immutable and every parse builds its own accumulator,
so a single parser can be shared between threads.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from personname.name_data import (
    TITLES,
    SUFFIXES,
    CONJUNCTIONS,
    PREFIXES,
    assert_normalized,
    assert_disjoint,
)


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class PersonName:
    """Structured components of a parsed name. Empty strings mark unset fields."""

    title: str = ""
    first: str = ""
    middle: str = ""
    last: str = ""
    suffix: str = ""
    nicknames: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, full_name: str) -> Optional["PersonName"]:
        """Parse with the default tables; None when there is nothing to parse."""
        return parse_name(full_name)

    @property
    def is_empty(self) -> bool:
        return not any((self.title, self.first, self.middle, self.last, self.suffix, self.nicknames))

    def as_dict(self) -> Dict[str, Union[str, List[str]]]:
        return {
            "title": self.title,
            "first": self.first,
            "middle": self.middle,
            "last": self.last,
            "suffix": self.suffix,
            "nicknames": list(self.nicknames),
        }


@dataclass(frozen=True)
class ParseResult:
    """Result of a parse: either a PersonName or the reason nothing could be extracted."""

    success: bool
    person: Optional[PersonName]
    error_message: Optional[str] = None

    @classmethod
    def success_with_person(cls, person: PersonName) -> "ParseResult":
        return cls(success=True, person=person, error_message=None)

    @classmethod
    def failure(cls, error_message: str) -> "ParseResult":
        return cls(success=False, person=None, error_message=error_message)


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


def _lookup_key(entry: str) -> str:
    return entry.rstrip(".").lower()


def _suffix_lookup_key(entry: str) -> str:
    return entry.replace(".", "").lower()


def _normalize_table(table_name: str, entries: Iterable[str], normalize: Callable[[str], str]) -> FrozenSet[str]:
    """Normalize custom table entries into the lookup form used by the classifier."""
    raw_entries = [entry.strip() for entry in entries]
    table = frozenset(normalize(entry) for entry in raw_entries)
    changed = sum(1 for entry in raw_entries if normalize(entry) != entry)
    if changed:
        logging.warning(f"Normalized {changed} {table_name} entries to their lookup form")
    return table


@dataclass(frozen=True)
class NameParserConfig:
    """Immutable configuration holding the lexical category tables and nickname delimiters."""

    titles: FrozenSet[str]
    suffixes: FrozenSet[str]
    conjunctions: FrozenSet[str]
    prefixes: FrozenSet[str]

    nickname_open: str = "("
    nickname_close: str = ")"

    def __post_init__(self) -> None:
        assert_normalized("titles", self.titles)
        assert_normalized("suffixes", self.suffixes, strip_all_periods=True)
        assert_normalized("prefixes", self.prefixes)
        assert_normalized("conjunctions", self.conjunctions, case_sensitive=True)
        assert_disjoint(("titles", self.titles), ("suffixes", self.suffixes))
        assert_disjoint(("prefixes", self.prefixes), ("suffixes", self.suffixes))

        for delimiter in (self.nickname_open, self.nickname_close):
            if len(delimiter) != 1 or delimiter.isspace():
                raise ValueError(f"Nickname delimiter must be a single visible character: {delimiter!r}")
        if self.nickname_open == self.nickname_close:
            raise ValueError(f"Nickname delimiters must differ: {self.nickname_open!r}")

    @classmethod
    def create_default(cls) -> "NameParserConfig":
        """Factory method building the configuration from the built-in tables."""
        return cls(titles=TITLES, suffixes=SUFFIXES, conjunctions=CONJUNCTIONS, prefixes=PREFIXES)

    def with_titles(self, titles: Iterable[str]) -> "NameParserConfig":
        return replace(self, titles=_normalize_table("titles", titles, _lookup_key))

    def with_suffixes(self, suffixes: Iterable[str]) -> "NameParserConfig":
        return replace(self, suffixes=_normalize_table("suffixes", suffixes, _suffix_lookup_key))

    def with_prefixes(self, prefixes: Iterable[str]) -> "NameParserConfig":
        return replace(self, prefixes=_normalize_table("prefixes", prefixes, _lookup_key))

    def with_conjunctions(self, conjunctions: Iterable[str]) -> "NameParserConfig":
        # Conjunctions are matched verbatim, so only surrounding whitespace is removed
        return replace(self, conjunctions=frozenset(entry.strip() for entry in conjunctions))

    def with_nickname_delimiters(self, open_char: str, close_char: str) -> "NameParserConfig":
        return replace(self, nickname_open=open_char, nickname_close=close_char)


# ════════════════════════════════════════════════════════════════════════════════
# LEXICAL CLASSIFIER
# ════════════════════════════════════════════════════════════════════════════════


class LexicalClassifier:
    """Case-insensitive category lookups for single tokens."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def is_initial(self, token: str) -> bool:
        """An alphabetic character, optionally followed by a period."""
        if len(token) == 1:
            return token.isalpha()
        if len(token) == 2:
            return token[0].isalpha() and token[1] == "."
        return False

    def is_title(self, token: str) -> bool:
        return _lookup_key(token) in self._config.titles

    def is_prefix(self, token: str) -> bool:
        normalized = _lookup_key(token)
        return not self.is_initial(normalized) and normalized in self._config.prefixes

    def is_suffix(self, token: str) -> bool:
        """
        Check a token against the suffix table.

        All periods are removed before the lookup so that dotted forms such as "Ph.D." or
        "M.D." match their plain entries. Initials never count as suffixes.
        """
        normalized = _suffix_lookup_key(token)
        return not self.is_initial(normalized) and normalized in self._config.suffixes

    def is_conjunction(self, token: str) -> bool:
        return token in self._config.conjunctions

    def all_suffixes(self, tokens: Iterable[str]) -> bool:
        return all(self.is_suffix(token) for token in tokens)


# ════════════════════════════════════════════════════════════════════════════════
# NICKNAME EXTRACTION
# ════════════════════════════════════════════════════════════════════════════════


class NicknameExtractor:
    """Removes delimited nicknames such as "(Jack)" from a full name."""

    def __init__(self, config: NameParserConfig):
        self._open = config.nickname_open
        self._close = config.nickname_close

    def find_span(self, text: str) -> Optional[Tuple[int, int]]:
        """Positions of the first opening delimiter and the first closing delimiter after it."""
        open_pos = text.find(self._open)
        if open_pos == -1:
            return None
        close_pos = text.find(self._close, open_pos + 1)
        if close_pos == -1:
            return None
        return open_pos, close_pos

    def extract(self, full_name: str) -> Tuple[str, List[str]]:
        """
        Extract nicknames from the input, in order of appearance.

        Returns the name with every delimited span removed (a single space left at each
        removal point) and the list of extracted nicknames. An unmatched opening delimiter
        ends extraction and leaves the rest of the text untouched.
        """
        nicknames = []
        name = full_name

        span = self.find_span(name)
        while span is not None:
            open_pos, close_pos = span
            nicknames.append(name[open_pos + 1 : close_pos])
            name = name[:open_pos].rstrip() + " " + name[close_pos + 1 :].lstrip()
            span = self.find_span(name)

        return name, nicknames


# ════════════════════════════════════════════════════════════════════════════════
# CONJUNCTION JOINING
# ════════════════════════════════════════════════════════════════════════════════


class ConjunctionJoiner:
    """Tokenizes a segment and merges tokens around conjunctions ("Mr." "and" "Mrs." -> "Mr. and Mrs.")."""

    def __init__(self, classifier: LexicalClassifier):
        self._classifier = classifier

    def tokenize(self, segment: str) -> List[str]:
        return segment.split()

    def join(self, tokens: Sequence[str]) -> Tuple[List[str], List[str]]:
        """
        Join tokens on interior conjunctions, leftmost first.

        A conjunction in the first or last position is never joined. After each merge the
        whole list is rescanned, so "a and b and c" compounds into one token.

        Returns:
            Tuple of (joined tokens, joined spans whose left-hand token is a title)
        """
        pieces = list(tokens)
        title_spans = []

        position = self._find_interior_conjunction(pieces)
        while position is not None:
            joined = " ".join(pieces[position - 1 : position + 2])
            if self._classifier.is_title(pieces[position - 1]):
                title_spans.append(joined)
            pieces[position - 1 : position + 2] = [joined]
            position = self._find_interior_conjunction(pieces)

        return pieces, title_spans

    def _find_interior_conjunction(self, pieces: List[str]) -> Optional[int]:
        return next((i for i in range(1, len(pieces) - 1) if self._classifier.is_conjunction(pieces[i])), None)


# ════════════════════════════════════════════════════════════════════════════════
# FIELD ASSIGNMENT
# ════════════════════════════════════════════════════════════════════════════════

# Outcomes of a scan rule; a rule that does not apply returns None
_CONTINUE = "continue"
_STOP = "stop"

ScanRule = Callable[["_NameFields", List[str], int], Optional[str]]


class _NameFields:
    """Per-parse field accumulator, frozen into a PersonName once assignment is done."""

    __slots__ = ("title", "first", "middle", "last", "suffix", "nicknames")

    def __init__(self, nicknames: Sequence[str] = ()):
        self.title: List[str] = []
        self.first: List[str] = []
        self.middle: List[str] = []
        self.last: List[str] = []
        self.suffix: List[str] = []
        self.nicknames = tuple(nicknames)

    def freeze(self) -> PersonName:
        return PersonName(
            title=" ".join(self.title),
            first=" ".join(self.first),
            middle=" ".join(self.middle),
            last=" ".join(self.last),
            suffix=" ".join(self.suffix),
            nicknames=self.nicknames,
        )


class FieldAssigner:
    """
    Positional assignment of tokens to name fields.

    The comma-segment count picks the ordering:
    - one segment: "title first middle... last suffix"
    - the second segment made only of suffixes: "title first middle... last, suffix"
    - otherwise: "last [suffix], title first middles[, suffix...]"

    Each token is offered to an ordered table of rules and the first rule that applies
    handles it. Rule order is the classification priority.
    """

    def __init__(self, classifier: LexicalClassifier, joiner: ConjunctionJoiner):
        self._classifier = classifier
        self._joiner = joiner

        self._single_segment_rules: Tuple[ScanRule, ...] = (
            self._title_or_late_surname,
            self._first_name,
            self._last_name_then_suffixes,
            self._surname_prefix,
            self._middle_name,
            self._final_suffix,
            self._last_name,
        )
        self._suffixed_segment_rules: Tuple[ScanRule, ...] = (self._title,) + self._single_segment_rules[1:]
        self._given_segment_rules: Tuple[ScanRule, ...] = (
            self._title,
            self._first_name,
            self._given_suffix,
            self._any_middle_name,
        )

    def assign(self, fields: _NameFields, segments: Sequence[str]) -> None:
        if len(segments) == 1:
            self._assign_name_first(fields, segments[0], self._single_segment_rules)
        elif self._classifier.all_suffixes(segments[1].split()):
            # Segments after the suffix segment are not read
            fields.suffix.append(segments[1])
            self._assign_name_first(fields, segments[0], self._suffixed_segment_rules)
        else:
            self._assign_surname_first(fields, segments)

        self._postprocess_first(fields)

    def _assign_name_first(self, fields: _NameFields, segment: str, rules: Tuple[ScanRule, ...]) -> None:
        pieces = self._join_segment(fields, segment)

        if len(pieces) == 1 and self._classifier.is_title(pieces[0]):
            fields.title.append(pieces[0])
            return

        self._scan(fields, pieces, rules)

    def _assign_surname_first(self, fields: _NameFields, segments: Sequence[str]) -> None:
        # The surname segment may carry suffixes, but only once the surname has started
        for piece in self._join_segment(fields, segments[0]):
            if fields.last and self._classifier.is_suffix(piece):
                fields.suffix.append(piece)
            else:
                fields.last.append(piece)

        pieces = self._join_segment(fields, segments[1])

        if len(pieces) == 1 and self._classifier.is_title(pieces[0]):
            # A lone title-like token here is taken as the given name
            fields.first.append(pieces[0])
        else:
            self._scan(fields, pieces, self._given_segment_rules)

        fields.suffix.extend(segments[2:])

    def _join_segment(self, fields: _NameFields, segment: str) -> List[str]:
        pieces, title_spans = self._joiner.join(self._joiner.tokenize(segment))
        fields.title.extend(title_spans)
        return pieces

    def _scan(self, fields: _NameFields, pieces: List[str], rules: Tuple[ScanRule, ...]) -> None:
        for i in range(len(pieces)):
            outcome = None
            for rule in rules:
                outcome = rule(fields, pieces, i)
                if outcome is not None:
                    break
            if outcome == _STOP:
                break

    def _postprocess_first(self, fields: _NameFields) -> None:
        # "Mr. Johnson": the only name after a title is the surname
        if fields.title and fields.first and not fields.last:
            fields.last, fields.first = fields.first, []

    # ════════════════════════════════════════════════════════════════════
    # SCAN RULES
    # ════════════════════════════════════════════════════════════════════

    def _title_or_late_surname(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        if not self._classifier.is_title(pieces[i]):
            return None
        if fields.first or fields.middle:
            fields.last.append(pieces[i])
        else:
            fields.title.append(pieces[i])
        return _CONTINUE

    def _title(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        if not self._classifier.is_title(pieces[i]):
            return None
        fields.title.append(pieces[i])
        return _CONTINUE

    def _first_name(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        if fields.first:
            return None
        fields.first.append(pieces[i])
        return _CONTINUE

    def _last_name_then_suffixes(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        remaining = pieces[i + 1 :]
        if not self._classifier.all_suffixes(remaining):
            return None
        fields.last.append(pieces[i])
        fields.suffix.extend(remaining)
        return _STOP

    def _surname_prefix(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        if i + 1 >= len(pieces) or not self._classifier.is_prefix(pieces[i]):
            return None
        fields.last.append(pieces[i])
        return _CONTINUE

    def _middle_name(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        if i + 1 >= len(pieces):
            return None
        fields.middle.append(pieces[i])
        return _CONTINUE

    def _final_suffix(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        # Unreachable: _last_name_then_suffixes already claims the final token
        if not fields.last or not self._classifier.is_suffix(pieces[i]):
            return None
        fields.suffix.append(pieces[i])
        return _CONTINUE

    def _last_name(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        fields.last.append(pieces[i])
        return _CONTINUE

    def _given_suffix(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        if not self._classifier.is_suffix(pieces[i]):
            return None
        fields.suffix.append(pieces[i])
        return _CONTINUE

    def _any_middle_name(self, fields: _NameFields, pieces: List[str], i: int) -> Optional[str]:
        # Surname prefixes in the given-name segment stay part of the middle name
        fields.middle.append(pieces[i])
        return _CONTINUE


# ════════════════════════════════════════════════════════════════════════════════
# PARSER
# ════════════════════════════════════════════════════════════════════════════════


class PersonNameParser:
    """Main name parsing service."""

    def __init__(self, config: Optional[NameParserConfig] = None):
        self._config = config or NameParserConfig.create_default()
        self.classifier = LexicalClassifier(self._config)
        self.nicknames = NicknameExtractor(self._config)
        self.joiner = ConjunctionJoiner(self.classifier)
        self._assigner = FieldAssigner(self.classifier, self.joiner)

    @property
    def config(self) -> NameParserConfig:
        return self._config

    def parse(self, full_name: str) -> ParseResult:
        """
        Main API method: parse a full name into its components.

        Returns ParseResult with:
        - success=True, person=PersonName with every field that could be extracted
        - success=False, error_message=reason when the input holds neither name content nor nicknames
        """
        if not isinstance(full_name, str):
            return ParseResult.failure(f"expected a string, got {type(full_name).__name__}")

        name, nicknames = self.nicknames.extract(full_name)
        fields = _NameFields(nicknames)

        segments = [segment.strip() for segment in name.split(",")]
        segments = [segment for segment in segments if segment]

        if not segments:
            if fields.nicknames:
                return ParseResult.success_with_person(fields.freeze())
            logging.debug(f"Nothing to parse in {full_name!r}")
            return ParseResult.failure("nothing to parse")

        self._assigner.assign(fields, segments)
        return ParseResult.success_with_person(fields.freeze())


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global parser instance for module-level functions
_global_parser: Optional[PersonNameParser] = None


def _get_global_parser() -> PersonNameParser:
    """Get or create the global parser instance."""
    global _global_parser
    if _global_parser is None:
        _global_parser = PersonNameParser()
    return _global_parser


def parse_name(full_name: str) -> Optional[PersonName]:
    """
    Module-level convenience function for name parsing.

    Args:
        full_name: Input name string

    Returns:
        The parsed PersonName, or None when there is nothing to parse
    """
    result = _get_global_parser().parse(full_name)
    return result.person if result.success else None


def is_title(token: str) -> bool:
    return _get_global_parser().classifier.is_title(token)


def is_prefix(token: str) -> bool:
    return _get_global_parser().classifier.is_prefix(token)


def is_suffix(token: str) -> bool:
    return _get_global_parser().classifier.is_suffix(token)


def is_initial(token: str) -> bool:
    return _get_global_parser().classifier.is_initial(token)


def is_conjunction(token: str) -> bool:
    return _get_global_parser().classifier.is_conjunction(token)


def extract_nicknames(full_name: str) -> Tuple[str, List[str]]:
    """Split parenthetical nicknames off a full name."""
    return _get_global_parser().nicknames.extract(full_name)


def join_on_conjunctions(tokens: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Join tokens on interior conjunctions, returning (joined tokens, joined title spans)."""
    return _get_global_parser().joiner.join(tokens)
