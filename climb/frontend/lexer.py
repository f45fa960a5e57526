from __future__ import annotations
import logging
import re
from typing import Iterator, List, Optional, Union
from climb.frontend.utils import Token, TokenId, byte_tokens
from climb.frontend.errors import ErrorKind, LexError, NumberFormatError

logger = logging.getLogger(__name__)

INT_MAX = 2**31 - 1

int_pattern = re.compile(rb'[0-9]+')
symbol_pattern = re.compile(rb'[A-Za-z][A-Za-z0-9]*')

# Multi byte tokens; single byte operators come from byte_tokens
token_map = {
    re.compile(rb'[ \t\n\r\x0c]+'): None,
    int_pattern: TokenId.INT,
    symbol_pattern: TokenId.SYM,
}

Source = Union[bytes, str]

def as_bytes(source: Source) -> bytes:
    if isinstance(source, bytes):
        return source
    try:
        return source.encode('ascii')
    except UnicodeEncodeError as e:
        raise LexError(ErrorKind.UNEXPECTED_BYTE,
                       f'Unexpected character {source[e.start]!r}', e.start) from e

class Lexer:
    """Lazy token stream over a byte buffer, with a one token lookahead."""

    def __init__(self, source: Source) -> None:
        self.src = as_bytes(source)
        self.i = 0
        self.peeked: Optional[Token] = None

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next()).token_id != TokenId.EOF:
            yield tok

    def next(self) -> Token:
        if self.peeked is not None:
            tok, self.peeked = self.peeked, None
            return tok

        src = self.src
        while self.i < len(src):
            start = self.i
            if src[start] in byte_tokens:
                self.i += 1
                return Token(byte_tokens[src[start]], pos=start)

            for pattern, token_id in token_map.items():
                if (m := pattern.match(src, start)):
                    break
            else:
                raise LexError(ErrorKind.UNEXPECTED_BYTE,
                               f'Unexpected character {chr(src[start])!r}', start)

            self.i = m.end()
            if token_id == TokenId.INT:
                return self.make_int(m[0].decode('ascii'), start)
            elif token_id == TokenId.SYM:
                name = m[0].decode('ascii')
                logger.debug('symbol %s at %d', name, start)
                return Token(TokenId.SYM, name, start)

        return Token(TokenId.EOF, pos=self.i) # Idempotent once reached

    def peek(self) -> Token:
        if self.peeked is None:
            self.peeked = self.next()
        return self.peeked

    def make_int(self, text: str, start: int) -> Token:
        value = int(text)
        if value > INT_MAX:
            raise NumberFormatError(ErrorKind.NUMBER_OVERFLOW,
                                    f'Integer literal {text} does not fit in 32 bits', start)
        logger.debug('int %d at %d', value, start)
        return Token(TokenId.INT, value, start)

def tokenize(source: Source) -> List[Token]:
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(lexer.next())
    return tokens
