#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Grammar for the concept markdown dialect.

- combinators: backtracking parser toolkit
- stops: scan boundaries
- inline: text runs, anchors and spans
- blocks: element parsers
"""

from conceptmd.parsing.blocks import BlockGrammar
from conceptmd.parsing.combinators import ParseFailure
from conceptmd.parsing.inline import merge_runs, merge_tokens, parse_anchor, parse_span, parse_text, parse_token
from conceptmd.parsing.stops import NEWLINE_STOP, UNIVERSAL_STOP, Stop, StopSet, scan_until

__all__ = [
    "BlockGrammar",
    "ParseFailure",
    "Stop",
    "StopSet",
    "UNIVERSAL_STOP",
    "NEWLINE_STOP",
    "scan_until",
    "parse_text",
    "parse_token",
    "parse_anchor",
    "parse_span",
    "merge_runs",
    "merge_tokens",
]
