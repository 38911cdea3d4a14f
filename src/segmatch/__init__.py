"""segmatch — Pattern matching over OneBot12 message segments.

All public types are exported from this module for flat imports:

    from segmatch import commander, match_segments, parse_pattern, text
"""

__version__ = "0.1.0"

# Orchestration
from segmatch._commander import Callback, Commander, commander

# Config types — see segmatch._config for details
from segmatch._config import (
    CommanderConfig,
    load_commander_config,
    parse_commander_config,
    parse_field_map,
)

# Errors
from segmatch._errors import (
    ConfigParseError,
    PatternParseError,
    SegmatchError,
    ValidationError,
)

# Field mapping
from segmatch._field_mapping import (
    DEFAULT_FIELD_MAP,
    FieldExtractor,
    FieldMapping,
    field_values,
    merge_field_map,
)

# Matching
from segmatch._matcher import SegmentMatcher, match_segments

# Pattern compiler
from segmatch._parser import parse_default_value, parse_pattern
from segmatch._result import MatchResult

# Segments
from segmatch._segments import AT, FACE, IMAGE, TEXT, Segment, at, face, image, segment, text

# Tokens
from segmatch._tokens import (
    LiteralToken,
    ParameterToken,
    PatternToken,
    RestParameterToken,
    TypedLiteralToken,
    is_optional,
    literal,
    parameter,
    rest_parameter,
    typed_literal,
)

__all__ = [
    # Segments
    "Segment",
    "TEXT",
    "FACE",
    "IMAGE",
    "AT",
    "segment",
    "text",
    "face",
    "image",
    "at",
    # Tokens
    "LiteralToken",
    "TypedLiteralToken",
    "ParameterToken",
    "RestParameterToken",
    "PatternToken",
    "is_optional",
    "literal",
    "typed_literal",
    "parameter",
    "rest_parameter",
    # Matching
    "MatchResult",
    "SegmentMatcher",
    "match_segments",
    # Field mapping
    "DEFAULT_FIELD_MAP",
    "FieldMapping",
    "FieldExtractor",
    "merge_field_map",
    "field_values",
    # Pattern compiler
    "parse_pattern",
    "parse_default_value",
    # Orchestration
    "Callback",
    "Commander",
    "commander",
    # Config
    "CommanderConfig",
    "parse_commander_config",
    "parse_field_map",
    "load_commander_config",
    # Errors
    "SegmatchError",
    "PatternParseError",
    "ValidationError",
    "ConfigParseError",
]
