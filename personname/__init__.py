from personname.person_names import (
    ConjunctionJoiner,
    FieldAssigner,
    LexicalClassifier,
    NameParserConfig,
    NicknameExtractor,
    ParseResult,
    PersonName,
    PersonNameParser,
    extract_nicknames,
    is_conjunction,
    is_initial,
    is_prefix,
    is_suffix,
    is_title,
    join_on_conjunctions,
    parse_name,
)

__all__ = [
    "ConjunctionJoiner",
    "FieldAssigner",
    "LexicalClassifier",
    "NameParserConfig",
    "NicknameExtractor",
    "ParseResult",
    "PersonName",
    "PersonNameParser",
    "extract_nicknames",
    "is_conjunction",
    "is_initial",
    "is_prefix",
    "is_suffix",
    "is_title",
    "join_on_conjunctions",
    "parse_name",
]
