'''
End to end expression evaluation tests
'''

import math

from scicalc import EvaluationContext, evaluate_expression
from scicalc.registry import AngleMode
from scicalc.util import (
    CalculatorError,
    DomainError,
    ExpressionSyntaxError,
    InvalidExpressionError,
    LexError,
    UnknownVariableError,
)

from pytest import approx, mark, raises


@mark.parametrize('text,expected', [
    ('2+3*4', 14),
    ('(2+3)*4', 20),
    ('2^3^2', 512),
    ('-2^2', -4),
    ('2^-2', 0.25),
    ('10-4-3', 3),
    ('12/3/2', 2),
    ('2×3÷4', 1.5),
    ('5!', 120),
    ('0!', 1),
    ('-3!', -6),
    ('-2^2!', -4),
    ('3!-1', 5),
    ('3!2', 12),
    ('--3', 3),
    ('3(4)', 12),
    ('(1+1)(2+2)', 8),
    ('√9', 3),
    ('√9+1', 4),
    ('2√9', 6),
    ('nCr(5,2)', 10),
    ('nPr(5,2)', 20),
    ('NCR(6,0)', 1),
    ('nthroot(27,3)', 3),
    ('nthroot(-8,3)', -2),
    ('abs(-3)', 3),
    ('floor(2.7)', 2),
    ('ceil(2.1)', 3),
    ('round(2.5)', 3),
    ('round(-2.5)', -2),
    ('sign(-4)', -1),
    ('cbrt(-27)', -3),
    ('log(1000)', 3),
    ('ln(e)', 1),
    ('exp(0)', 1),
    ('deg(pi)', 180),
    ('rad(180)', math.pi),
])
def test_arithmetic(text, expected):
    assert evaluate_expression(text) == approx(expected)


def test_implicit_pi():
    assert evaluate_expression('2π') == approx(2 * math.pi)
    assert evaluate_expression('2pi') == approx(2 * math.pi)


def test_implicit_products_of_functions():
    context = EvaluationContext(variables={'x': 0.3})
    assert evaluate_expression('sin(x)cos(x)', context) == \
        approx(math.sin(0.3) * math.cos(0.3))


def test_degrees():
    context = EvaluationContext(angle_mode=AngleMode.DEG)
    assert evaluate_expression('sin(90)', context) == approx(1)
    assert evaluate_expression('cos(180)', context) == approx(-1)
    assert evaluate_expression('atan(1)', context) == approx(45)
    assert evaluate_expression('acos(0)', context) == approx(90)


def test_radians():
    context = EvaluationContext(angle_mode='RAD')
    assert evaluate_expression('sin(pi/2)', context) == approx(1)
    assert evaluate_expression('asin(1)', context) == approx(math.pi / 2)


def test_angle_mode_names():
    assert EvaluationContext(angle_mode='deg').angle_mode is AngleMode.DEG
    assert EvaluationContext(angle_mode='Rad').angle_mode is AngleMode.RAD


def test_unknown_angle_mode():
    with raises(CalculatorError, match='Unknown angle mode'):
        EvaluationContext(angle_mode='grad')


def test_hyperbolic_ignores_angle_mode(degrees):
    assert evaluate_expression('sinh(1)', degrees) == approx(math.sinh(1))
    assert evaluate_expression('atanh(0.5)', degrees) == \
        approx(math.atanh(0.5))


def test_angle_conversions_ignore_angle_mode(degrees):
    assert evaluate_expression('deg(pi)', degrees) == approx(180)


def test_empty_returns_ans():
    assert evaluate_expression('', EvaluationContext(ans=7)) == 7
    assert evaluate_expression('   ', EvaluationContext(ans=7)) == 7
    assert evaluate_expression('') == 0


def test_ans():
    context = EvaluationContext(ans=7)
    assert evaluate_expression('Ans*2', context) == 14
    assert evaluate_expression('2ans', context) == 14


def test_defaults_without_variables():
    assert evaluate_expression('e') == approx(math.e)
    assert evaluate_expression('Ans+1') == 1


def test_greek_variables():
    context = EvaluationContext(variables={'θ': 2})
    assert evaluate_expression('3θ', context) == 6


def test_factorial_domain():
    with raises(DomainError, match='non-negative integers'):
        evaluate_expression('(-1)!')
    with raises(DomainError, match='non-negative integers'):
        evaluate_expression('2.5!')


def test_factorial_of_nonfinite():
    with raises(DomainError, match='Non-finite'):
        evaluate_expression('(1/0)!')


def test_factorial_overflow():
    assert evaluate_expression('171!') == math.inf


def test_combinatorics_overflow():
    assert evaluate_expression('nPr(3000000,3000000)') == math.inf
    assert evaluate_expression('nPr(1000,171)') == math.inf
    assert evaluate_expression('nCr(100000000,50000000)') == math.inf
    assert evaluate_expression('nCr(2000,1000)') == math.inf


def test_combinatorics_large_but_finite():
    assert evaluate_expression('nCr(100000000,2)') == 4999999950000000
    assert evaluate_expression('nCr(100000000,99999999)') == 100000000
    assert evaluate_expression('nPr(100000000,1)') == 100000000


def test_combinatorics_domain():
    with raises(DomainError, match='nCr'):
        evaluate_expression('nCr(2,5)')
    with raises(DomainError, match='nPr'):
        evaluate_expression('nPr(2.5,1)')
    with raises(DomainError):
        evaluate_expression('nCr(-1,0)')


def test_ieee_results_propagate():
    assert evaluate_expression('1/0') == math.inf
    assert evaluate_expression('-1/0') == -math.inf
    assert math.isnan(evaluate_expression('0/0'))
    assert math.isnan(evaluate_expression('sqrt(-1)'))
    assert math.isnan(evaluate_expression('√-4'))
    assert math.isnan(evaluate_expression('asin(2)'))
    assert math.isnan(evaluate_expression('(-8)^(1/3)'))
    assert evaluate_expression('ln(0)') == -math.inf
    assert evaluate_expression('10^400') == math.inf
    assert evaluate_expression('exp(1000)') == math.inf
    assert evaluate_expression('0^-1') == math.inf


def test_lex_error():
    with raises(LexError):
        evaluate_expression('2 & 3')


def test_syntax_error():
    with raises(ExpressionSyntaxError):
        evaluate_expression('(2+3')


def test_unknown_variable():
    with raises(UnknownVariableError, match='Unknown variable: y'):
        evaluate_expression('2y')


def test_invalid_expression():
    with raises(InvalidExpressionError):
        evaluate_expression('()')
    with raises(InvalidExpressionError):
        evaluate_expression('(1,2)')
    with raises(InvalidExpressionError):
        evaluate_expression('*3')


def test_calls_are_independent():
    context = EvaluationContext(variables={'x': 2})
    first = evaluate_expression('x^2+1', context)
    assert evaluate_expression('x^2+1', context) == first
    assert context.variables == {'x': 2}
