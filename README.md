# edecl

The front end of the edecl declaration language. It has four modules:

- `edecl.lexer`: a lexer that turns source text into spanned tokens.
- `edecl.tokens`: token types for identifiers, string literals, numbers, symbols and brackets.
- `edecl.spans`: source spans and values tagged with them.
- `edecl.diagnostics`: diagnostics with error codes and labelled spans, which can be rendered against the source text.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Lexing

```python
from edecl.lexer import Lexer, tokenize
from edecl.tokens import token

for item in Lexer('name = "value" -> (a, b);', file_id=0):
    print(item.span.range(), item.data)

tokens = [t.data for t in tokenize("x -> y", file_id=0)]
assert tokens == [token("x"), token("->"), token("y")]
```

`Lexer(src, file_id=0)` is an iterator. `tokenize(src, file_id=0)` lexes the whole text and returns a list. Whitespace between tokens is skipped.

The lexer recognises these tokens:

- identifiers: `[A-Za-z_][A-Za-z0-9_]*`
- the symbols `. , ; = | + - / * ^ < >` and `->`
- the brackets `( ) [ ] { }`
- double-quoted string literals, with the escapes `\r`, `\n`, `\t`, `\"` and `\\`. A backslash followed directly by a newline continues the literal on the next line.

Every token comes back as a `PartialSpanned` value. It holds `data`, which is the `Token`, and `span`, which is a `Span` of character offsets into the source. The range is half-open, `[start, end)`. Call `with_file(file_id)` on one of these to get a `Spanned` value that carries a `FullSpan`. Both classes have `map(func)`, which transforms the value and keeps the span.

## Tokens

`Token` has a `kind` and a `value`. These constructors build one:

- `Token.identifier`
- `Token.string_literal`
- `Token.number`
- `Token.symbol` (takes a `Symbol`)
- `Token.opening` (takes a `BracketType`)
- `Token.closing` (takes a `BracketType`)

The helper `token(text)` builds a token from its spelling. For example:

- `token("->")` gives a symbol token.
- `token("{")` gives an opening bracket token.
- `token("name")` gives an identifier token.
- `token("42")` and `token(42)` give number tokens.
- `token('"text"')` gives a string literal token.

`str(tok)` gives the source form of the token. String literals come back quoted and escaped.

## Errors

The lexer raises a `Diagnostic` exception for malformed input. Once it has raised, the lexer is exhausted.

| Code   | Meaning                                 |
|--------|-----------------------------------------|
| EL0001 | Unexpected character                    |
| EL0002 | Invalid escape sequence in a string     |
| EL0003 | No end quote found for a string literal |

A `Diagnostic` has these attributes:

- `severity`: a `Severity`
- `code`
- `message`
- `hints`: `Hint` values, each with a message, a `FullSpan` and a `LabelStyle`

`str(err)` gives a line such as `error[EL0003]: No end quote found for string literal`. `render(source, name)` adds each hint under the source line it points at:

```python
from edecl.diagnostics import Diagnostic
from edecl.lexer import tokenize

source = 'a = "unterminated'
try:
    tokenize(source, file_id=0)
except Diagnostic as err:
    print(err.render(source, "input.edecl"))
```

## Limitations

This package is a lexer, not a full language front end. It does not parse, and it has no command-line tool.

The lexer never produces number tokens. A digit that does not follow an identifier raises `EL0001`. Number tokens can only be built directly with `Token.number` or `token`.

## Running the tests

```
pytest
```