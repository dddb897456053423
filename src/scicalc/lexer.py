from collections import namedtuple
from enum import Enum
from functools import reduce
import logging
import math
import operator

import regex

from .registry import CONSTANTS, FUNCTIONS, OPERATORS, Function, Operator
from .util import LexError


logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = 'number'
    CONSTANT = 'constant'
    VARIABLE = 'variable'
    OPERATOR = 'operator'
    FUNCTION = 'function'
    OPENING = 'opening'
    CLOSING = 'closing'
    COMMA = 'comma'


Token = namedtuple('Token', 'type value')

# Inserted between two juxtaposed operands, as in 2π or 3(x+1).
MULTIPLY = Token(TokenType.OPERATOR, Operator.MULTIPLY)


class Lexer:
    '''
    Lexer for the infix expression grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # No exponent notation: 1e5 is 1 times the variable e5.
    NUMBER = r'''
              (?:
                  [0-9]
                  |
                  # .5 but not a lone .
                  \.(?=[0-9])
              )
              [0-9.]*
              '''
    # Latin, µ, and Greek letters except π, which is a constant on its own.
    IDENTIFIER = r'''
                  [[A-Za-z_µ\p{Greek}]--[π]]
                  [[A-Za-z_µ\p{Greek}0-9]--[π]]*
                  '''
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    PI = r'π'
    SQRT = r'√'
    OPENING = r'\('
    CLOSING = r'\)'
    COMMA = r','

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<identifier>' + IDENTIFIER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<pi>' + PI + r')|' \
             r'(?<sqrt>' + SQRT + r')|' \
             r'(?<opening>' + OPENING + r')|' \
             r'(?<closing>' + CLOSING + r')|' \
             r'(?<comma>' + COMMA + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    SPACE = regex.compile(r'\s+')

    # Token kinds that end an operand, and those that start one.
    ENDS_OPERAND = {TokenType.NUMBER, TokenType.CONSTANT, TokenType.VARIABLE,
                    TokenType.CLOSING}
    STARTS_OPERAND = {TokenType.NUMBER, TokenType.CONSTANT,
                      TokenType.VARIABLE, TokenType.FUNCTION,
                      TokenType.OPENING}

    def __init__(self):
        self.pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Take a line and yield all tokens, with implicit multiplications.

        Whitespace is insignificant and removed before scanning.
        '''
        previous = None
        for token in self.scan(type(self).SPACE.sub('', line)):
            if self.implies_multiplication(previous, token):
                yield MULTIPLY
            yield token
            previous = token

    def scan(self, line):
        '''
        Yield one token per lexeme, stopping on the first bad character.
        '''
        position = 0
        while position < len(line):
            match = self.pattern.match(line, position)
            if match is None:
                raise LexError(
                    'Unrecognized character {!r}'.format(line[position]))
            yield self.convert(match.lastgroup, match.group())
            position = match.end()

    def convert(self, kind, text):
        '''
        Turn a lexeme into a token.
        '''
        if kind == 'number':
            return Token(TokenType.NUMBER, self._number(text))
        elif kind == 'identifier':
            return self._identifier(text)
        elif kind == 'operator':
            return Token(TokenType.OPERATOR, OPERATORS[text])
        elif kind == 'pi':
            return Token(TokenType.CONSTANT, math.pi)
        elif kind == 'sqrt':
            return Token(TokenType.FUNCTION, Function.SQRT)
        elif kind == 'opening':
            return Token(TokenType.OPENING, text)
        elif kind == 'closing':
            return Token(TokenType.CLOSING, text)
        elif kind == 'comma':
            return Token(TokenType.COMMA, text)

    def _number(self, text):
        try:
            value = float(text)
        except ValueError:
            raise LexError('Invalid number: {}'.format(text)) from None
        if not math.isfinite(value):
            raise LexError('Invalid number: {}'.format(text))
        return value

    def _identifier(self, text):
        lower = text.lower()
        if lower in FUNCTIONS:
            return Token(TokenType.FUNCTION, FUNCTIONS[lower])
        elif lower == 'ans':
            return Token(TokenType.VARIABLE, 'Ans')
        elif lower in CONSTANTS:
            return Token(TokenType.CONSTANT, CONSTANTS[lower])
        return Token(TokenType.VARIABLE, text)

    def implies_multiplication(self, previous, token):
        '''
        Return True if a multiplication is implied between the two tokens.
        '''
        if previous is None or token.type not in type(self).STARTS_OPERAND:
            return False
        return (previous.type in type(self).ENDS_OPERAND or
                previous.type is TokenType.OPERATOR and
                previous.value.ispostfix)


def tokenize(text):
    '''
    Return the tokens of text as a list.
    '''
    tokens = list(Lexer().lex(text))
    logger.debug('tokens of %r: %s', text, tokens)
    return tokens
