from enum import Enum, auto
from typing import Optional

funs = '+-*/%^'

class TokenType(Enum):
    SCALAR = auto()
    NAME = auto()
    FUN = auto()
    LPAREN = auto()
    RPAREN = auto()
    OTHER = auto()
    EOF = auto()

TOK: dict[str, TokenType] = {
    "(":  TokenType.LPAREN,
    ")":  TokenType.RPAREN,
}

class Token:

    def __init__(self, kind: TokenType, tok: str|int|float, pos: int, text: Optional[str] = None) -> None:
        self.kind = kind
        self.tok = tok
        self.pos = pos
        self.text = text if text is not None else str(tok) # source spelling

    def __str__(self) -> str:
        return f"Token({self.kind}, {self.tok})"

class Tokeniser:
    """
    Left-to-right scanner for simple arithmetic expressions such as

        ((5+3)*(7-2))

    Symbols it doesn't know become OTHER tokens rather than errors, so any
    string can be traced for bracket balance.
    """
    def __init__(self, chunk: str) -> None:
        self.chunk = chunk
        self.pos = 0

    def getname(self) -> Token:
        start = self.pos
        while self.pos < len(self.chunk) and (self.chunk[self.pos].isalnum() or self.chunk[self.pos] == '_'):
            self.pos += 1
        return Token(TokenType.NAME, self.chunk[start:self.pos], start)

    def getnum(self) -> Token:
        start = self.pos
        while self.pos < len(self.chunk) and (self.chunk[self.pos] == '.' or self.chunk[self.pos].isdecimal()):
            self.pos += 1

        tok = self.chunk[start:self.pos]
        if tok.count('.') > 1: # 1.2.3 is not a number; keep the text as is
            return Token(TokenType.OTHER, tok, start)

        if '.' in tok:
            val: int|float = float(tok)
        else:
            val = int(tok)

        return Token(TokenType.SCALAR, val, start, tok)

    def lex(self) -> list[Token]:
        tokens = []
        while self.pos < len(self.chunk):
            hd = self.chunk[self.pos]

            if hd.isspace():  # skip whitespace
                self.pos += 1
                continue

            if hd.isdecimal():  # numeric scalar: decimal digits only, so ² is OTHER
                tokens.append(self.getnum())
                continue

            if hd.isalpha() or hd == '_':
                tokens.append(self.getname())
                continue

            if hd in funs:
                tokens.append(Token(TokenType.FUN, hd, self.pos))
            else:
                tokens.append(Token(TOK.get(hd, TokenType.OTHER), hd, self.pos))
            self.pos += 1

        tokens.append(Token(TokenType.EOF, '<EOF>', self.pos))
        return tokens

def spaced(chunk: str) -> str:
    """
    Reformat an expression with single spaces around its operators:

        "((5+3)*(7-2))" -> "((5 + 3) * (7 - 2))"

    Everything else keeps its source spelling, and a run of whitespace
    between two operands collapses to one space.
    """
    out = ''
    prev: Optional[Token] = None
    for t in Tokeniser(chunk).lex():
        if t.kind == TokenType.EOF:
            break
        if t.kind == TokenType.FUN:
            out = f"{out.rstrip()} {t.tok} " if out else f"{t.tok} "
        else:
            if prev is not None and prev.kind != TokenType.FUN and t.pos > prev.pos + len(prev.text):
                out += ' '
            out += t.text
        prev = t
    return out.rstrip()
