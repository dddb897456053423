from collections import deque
import logging

from .context import EvaluationContext
from .lexer import TokenType
from .util import InvalidExpressionError, UnknownVariableError


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine.

    Takes RPN tokens and runs them. Meant to be thrown away after a single
    expression.
    '''

    def __init__(self, context=None):
        '''
        Create empty stack machine.

        :param context: EvaluationContext to resolve variables and angles in.
        '''
        self.context = context or EvaluationContext()
        self.bindings = self.context.bindings()
        self.stack = deque()

    def run(self, rpn):
        '''
        Feed every token and return the single value left on the stack.
        '''
        for token in rpn:
            self.feed(token)
        if len(self.stack) != 1:
            raise InvalidExpressionError('Invalid expression')
        return self.stack[0]

    def feed(self, token):
        '''
        Stack or run one token on machine.
        '''
        if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            self._pshstack(token.value)
        elif token.type is TokenType.VARIABLE:
            self._pshstack(self.load(token.value))
        elif token.type is TokenType.OPERATOR:
            operator = token.value
            self._pshstack(operator.apply(*self._args(operator.arity)))
        elif token.type is TokenType.FUNCTION:
            function = token.value
            self._pshstack(function.apply(self._args(function.arity),
                                          self.context.angle_mode))
        else:
            raise InvalidExpressionError(
                'Unexpected {} in RPN'.format(token.type.value))

    def load(self, name):
        '''
        Return value bound to variable name.
        '''
        try:
            return self.bindings[name]
        except KeyError:
            raise UnknownVariableError(
                'Unknown variable: {}'.format(name)) from None

    def _args(self, n):
        # If you don't reverse, you'll do 2**9 when you say 9 2 ^ instead of
        # 9**2.
        return list(reversed(self._popstack(n)))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise InvalidExpressionError(
                'Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]


def evaluate(rpn, context=None):
    '''
    Run RPN tokens on a fresh machine and return the result.
    '''
    result = Machine(context).run(rpn)
    logger.debug('result: %r', result)
    return result
