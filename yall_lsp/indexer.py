from __future__ import annotations

"""
Lightweight indexer for yall files without evaluating code.

We scan for top-level forms and build an index for:
- definitions: (def name value), classified as a function when the value is
  an (fn ...) form and as a variable otherwise
- paren balance and unterminated strings
- the reader's own verdict: the message of the parse error, if any

The scanner is tolerant: it never raises on partial/incomplete buffers. We
only extract enough structure to power LSP features (document symbols,
completion, diagnostics).
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import re

from yall.reader.parser import read
from yall.types.errors import YallParseError

# Simple token patterns for scanning
TOKEN_REGEX = re.compile(
    r"\s+|[()\[\]]|'|`|,@|,|\"(?:\\.|[^\"\\])*\"?|[^\s()\[\]'`,\"]+",
)

STRING_RE = re.compile(r"\"(?:\\.|[^\"\\])*\"")

OPEN = ("(", "[")
CLOSE = (")", "]")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    has_unmatched_quote: bool = False
    parse_error: Optional[str] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace():
            continue
        yield tok, m.start(), m.end()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, start, _) in enumerate(tokens):
        if tok in CLOSE:
            idx.paren_balance -= 1
            continue
        if tok not in OPEN:
            if tok.startswith('"') and not STRING_RE.fullmatch(tok):
                idx.has_unmatched_quote = True
            continue

        idx.paren_balance += 1
        # Only top-level (def name value) forms define document symbols
        if idx.paren_balance != 1:
            continue
        window = [t for t, _, _ in tokens[i + 1:i + 5]]
        if len(window) < 2 or window[0] != "def":
            continue
        name = window[1]
        if name in OPEN or name in CLOSE or name.startswith('"'):
            continue
        kind = "function" if window[2:4] in (["(", "fn"], ["[", "fn"]) else "var"
        line, col = _position_from_offset(text, tokens[i + 2][1])
        idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col)

    try:
        read(text)
    except YallParseError as ex:
        idx.parse_error = str(ex)

    return idx


# Builtin signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "if": "(if test then else)",
    "def": "(def name value)",
    "fn": "(fn (params ...) body ...)",
    "eval": "(eval expr ...)",
    "+": "(+ nums ...)",
    "-": "(- x ys ...)",
    "*": "(* nums ...)",
    "/": "(/ x ys ...)",
    "list": "(list xs ...)",
    "car": "(car xs)",
    "cdr": "(cdr xs)",
    "cons": "(cons x xs)",
    "null?": "(null? x)",
}
