"""Tokenize arithmetic in a few lines with zero config."""

from patlex import LexerBuilder

lexer = (
    LexerBuilder()
    .token(r"[0-9]+", lambda text: ("NUM", int(text)))
    .token(r"[-+*/]", lambda text: text)
    .token(r"[()]", lambda text: text)
    .skip(r"\s+")
    .build()
)

source = "(1 + 2) * 3"
for token in lexer.scan(source):
    print(f"{token.span!s:>8}  {token.kind!r}")
