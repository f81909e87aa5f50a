"""Free-threading safe: one Lexer, 1000 sources scanned in parallel."""

from concurrent.futures import ThreadPoolExecutor

from patlex import LexerBuilder

lexer = (
    LexerBuilder()
    .token(r"[A-Za-z_][A-Za-z0-9_]*", lambda text: ("IDENT", text))
    .token(r"[0-9]+", lambda text: ("INT", int(text)))
    .token(r"=", lambda _: "ASSIGN")
    .skip(r"\s+")
    .build()
)

sources = [f"x{i} = {i}\ny{i} = x{i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lexer.tokenize, sources))

print(f"Tokenized {len(results)} sources in parallel")
print("First source tokens:", len(results[0]))
print("Last source tokens:", len(results[-1]))
