from .context import EvaluationContext
from .lexer import tokenize
from .machine import evaluate
from .parser import parse


def evaluate_expression(text, context=None):
    '''
    Evaluate infix expression text and return its value.

    Blank text evaluates to Ans, like pressing = on a pocket calculator.

    :param text: Expression, e.g. '2sin(30)+Ans'.
    :param context: EvaluationContext; angles in radians and Ans = 0 if None.
    '''
    context = context or EvaluationContext()
    if not text or not text.strip():
        return context.ans
    return evaluate(parse(tokenize(text)), context)
