'''
Scientific calculator engine.

Evaluates infix expressions the way a handheld scientific calculator does:
operator precedence, implicit multiplication (2π, 3(x+1)), multi-argument
functions (nCr(5,2)), and trigonometry in radians or degrees. Also does small
matrix arithmetic and descriptive statistics, and formats numbers for display.

The pipeline is text → tokens (Lexer) → RPN (Parser) → value (Machine). Each
stage is pure; nothing is cached between calls, so evaluate as often as you
like, from as many threads as you like.
'''

from .cli import CLI
from .context import EvaluationContext
from .expression import evaluate_expression
from .formatting import format_number
from .lexer import Lexer, Token, TokenType, tokenize
from .machine import Machine, evaluate
from .matrix import (
    add_matrices,
    create_matrix,
    determinant,
    format_matrix,
    inverse,
    multiply_matrices,
    subtract_matrices,
)
from .parser import Parser, parse
from .registry import AngleMode, Function, Operator
from .stats import StatisticsResult, compute_statistics
from .util import (
    CalculatorError,
    DimensionError,
    DomainError,
    ExpressionSyntaxError,
    InvalidExpressionError,
    LexError,
    SingularMatrixError,
    UnknownVariableError,
)


__all__ = (
    'CLI',
    'EvaluationContext', 'AngleMode',
    'Lexer', 'Parser', 'Machine', 'Token', 'TokenType', 'Operator',
    'Function',
    'tokenize', 'parse', 'evaluate', 'evaluate_expression',
    'format_number', 'format_matrix',
    'StatisticsResult', 'compute_statistics',
    'create_matrix', 'add_matrices', 'subtract_matrices',
    'multiply_matrices', 'determinant', 'inverse',
    'CalculatorError', 'LexError', 'ExpressionSyntaxError', 'DomainError',
    'UnknownVariableError', 'InvalidExpressionError', 'DimensionError',
    'SingularMatrixError',
)
