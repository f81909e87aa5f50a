"""Stateful actions: intern identifiers while scanning and recover from errors.

Actions can hold state between calls. Here identifiers are interned into a
symbol table, so tokens carry small integer ids instead of strings. When a
character has no rule, the caller reports it and resumes after it.
"""

from enum import Enum, auto

from patlex import LexerBuilder, NoMatchingRuleError


class Kind(Enum):
    IF = auto()
    ELSE = auto()
    IDENT = auto()
    NUMBER = auto()
    OP = auto()


symbols: dict[str, int] = {}


def intern(text: str) -> tuple[Kind, int]:
    return Kind.IDENT, symbols.setdefault(text, len(symbols))


lexer = (
    LexerBuilder()
    .token(r"if", lambda _: Kind.IF)
    .token(r"else", lambda _: Kind.ELSE)
    .token(r"[a-z_][a-z0-9_]*", intern)
    .token(r"[0-9]+(?:\.[0-9]+)?", lambda _: Kind.NUMBER)
    .token(r"==|[=<>+\-*/]", lambda _: Kind.OP)
    .skip(r"\s+")
    .skip(r"#[^\n]*")  # comments
    .build()
)

source = """\
if iffy == 1.5   # keyword vs identifier
  else_ = iffy @ 2
"""

start = 0
while start < len(source):
    stream = lexer.scan(source[start:])
    try:
        for token in stream:
            print(f"{token.start + start:>3}  {token.kind}")
        break
    except NoMatchingRuleError as err:
        print(f"skipping {source[start + err.offset]!r}: {err}")
        start += err.offset + 1

print("symbols:", symbols)
