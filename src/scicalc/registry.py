'''
Operators and functions of the expression language.

Both are closed enumerations: every member carries its own precedence, arity
and behaviour, and the lookup tables below are read-only views built once at
import time.
'''

from enum import Enum
from types import MappingProxyType
import math
import operator
import sys

from . import config
from .util import DomainError, ieee


class AngleMode(Enum):
    RAD = 'RAD'
    DEG = 'DEG'


class Associativity(Enum):
    LEFT = 'L'
    RIGHT = 'R'


def _divide(left, right):
    '''
    Division that follows IEEE 754 instead of raising on zero.
    '''
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1, right)


def _isodd(n):
    return float(n).is_integer() and n % 2 == 1


def _power(base, exponent):
    '''
    Exponentiation that follows IEEE 754 instead of raising.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _isodd(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power; everything else is a domain error.
        if base == 0:
            if _isodd(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _isinteger(n):
    return math.isfinite(n) and float(n).is_integer()


def _factorial(n):
    if not math.isfinite(n):
        raise DomainError('Non-finite factorial')
    if abs(n - round(n)) > config.FACTORIAL_TOLERANCE or n < 0:
        raise DomainError('Factorial defined for non-negative integers')
    n = int(round(n))
    if n > config.MAX_FACTORIAL:
        return math.inf
    return float(math.factorial(n))


def _checked_pair(name, n, r):
    if not (_isinteger(n) and _isinteger(r)) or n < 0 or r < 0 or r > n:
        raise DomainError(
            '{} defined for integers with n ≥ r ≥ 0'.format(name))
    return int(n), int(r)


@ieee
def _permutations(n, r):
    n, r = _checked_pair('nPr', n, r)
    # nPr is a multiple of r!, so it overflows wherever r! does.
    if r > config.MAX_FACTORIAL:
        return math.inf
    return float(math.perm(n, r))


@ieee
def _combinations(n, r):
    n, r = _checked_pair('nCr', n, r)
    # nCr >= 2**k with k = min(r, n - r), past the largest float exponent.
    if min(r, n - r) >= sys.float_info.max_exp:
        return math.inf
    return float(math.comb(n, r))


def _sign(x):
    # Keeps ±0 and nan as they are.
    if x == 0 or math.isnan(x):
        return x
    return math.copysign(1.0, x)


def _nthroot(radicand, n):
    return _sign(radicand) * _power(abs(radicand), _divide(1, n))


def _sinh(x):
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


@ieee
def _atanh(x):
    if abs(x) == 1:
        return math.copysign(math.inf, x)
    return math.atanh(x)


def _logarithm(f):
    @ieee
    def wrapped(x):
        if x == 0:
            return -math.inf
        return f(x)
    wrapped.__name__ = f.__name__
    return wrapped


@ieee
def _floor(x):
    return float(math.floor(x))


@ieee
def _ceil(x):
    return float(math.ceil(x))


@ieee
def _round(x):
    # Half-way cases go up, as on a pocket calculator.
    return float(math.floor(x + 0.5))


def _degrees(x):
    return x * 180 / math.pi


def _radians(x):
    return x * math.pi / 180


class Operator(Enum):
    '''
    Infix, prefix and postfix operators.

    Negation is only ever produced by the parser, from a '-' in prefix
    position. It binds looser than '^' so that -2^2 is -(2^2).
    '''

    ADD = ('+', 2, Associativity.LEFT, 2, operator.__add__)
    SUBTRACT = ('-', 2, Associativity.LEFT, 2, operator.__sub__)
    MULTIPLY = ('*', 3, Associativity.LEFT, 2, operator.__mul__)
    DIVIDE = ('/', 3, Associativity.LEFT, 2, _divide)
    NEGATE = ('neg', 4, Associativity.RIGHT, 1, operator.__neg__)
    POWER = ('^', 5, Associativity.RIGHT, 2, _power)
    FACTORIAL = ('!', 6, Associativity.LEFT, 1, _factorial)

    def __init__(self, symbol, precedence, associativity, arity, function):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.arity = arity
        self.function = function

    @property
    def isprefix(self):
        return self is Operator.NEGATE

    @property
    def ispostfix(self):
        return self is Operator.FACTORIAL

    def yields_to(self, other):
        '''
        Return True if other must leave the parser stack before self goes on.
        '''
        if self.associativity is Associativity.LEFT:
            return self.precedence <= other.precedence
        return self.precedence < other.precedence

    def apply(self, *operands):
        return self.function(*operands)


class Function(Enum):
    '''
    Named functions, called with parenthesised arguments.

    angle is 'input' when the argument is an angle, 'output' when the result
    is one, and None when the angle mode doesn't matter.
    '''

    SIN = ('sin', 1, ieee(math.sin), 'input')
    COS = ('cos', 1, ieee(math.cos), 'input')
    TAN = ('tan', 1, ieee(math.tan), 'input')
    ASIN = ('asin', 1, ieee(math.asin), 'output')
    ACOS = ('acos', 1, ieee(math.acos), 'output')
    ATAN = ('atan', 1, math.atan, 'output')
    SINH = ('sinh', 1, _sinh, None)
    COSH = ('cosh', 1, ieee(math.cosh), None)
    TANH = ('tanh', 1, math.tanh, None)
    ASINH = ('asinh', 1, math.asinh, None)
    ACOSH = ('acosh', 1, ieee(math.acosh), None)
    ATANH = ('atanh', 1, _atanh, None)
    LN = ('ln', 1, _logarithm(math.log), None)
    LOG = ('log', 1, _logarithm(math.log10), None)
    SQRT = ('sqrt', 1, ieee(math.sqrt), None)
    CBRT = ('cbrt', 1, math.cbrt, None)
    ABS = ('abs', 1, abs, None)
    EXP = ('exp', 1, ieee(math.exp), None)
    FLOOR = ('floor', 1, _floor, None)
    CEIL = ('ceil', 1, _ceil, None)
    ROUND = ('round', 1, _round, None)
    SIGN = ('sign', 1, _sign, None)
    NPR = ('npr', 2, _permutations, None)
    NCR = ('ncr', 2, _combinations, None)
    NTHROOT = ('nthroot', 2, _nthroot, None)
    DEG = ('deg', 1, _degrees, None)
    RAD = ('rad', 1, _radians, None)

    def __init__(self, keyword, arity, function, angle):
        self.keyword = keyword
        self.arity = arity
        self.function = function
        self.angle = angle

    def apply(self, operands, angle_mode=AngleMode.RAD):
        '''
        Run function on operands, converting angles in degrees mode.
        '''
        degrees = angle_mode is AngleMode.DEG
        if degrees and self.angle == 'input':
            operands = [_radians(operand) for operand in operands]
        result = self.function(*operands)
        if degrees and self.angle == 'output':
            result = _degrees(result)
        return result


# Operator symbols as typed. Negation has no symbol of its own.
OPERATORS = MappingProxyType({
    **{op.symbol: op for op in Operator if not op.isprefix},
    '\N{MULTIPLICATION SIGN}': Operator.MULTIPLY,
    '\N{DIVISION SIGN}': Operator.DIVIDE,
})

# Lowercased function names.
FUNCTIONS = MappingProxyType({f.keyword: f for f in Function})

# Lowercased identifiers with a fixed value.
CONSTANTS = MappingProxyType({
    'pi': math.pi,
    'e': math.e,
})
