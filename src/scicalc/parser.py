'''
Infix to RPN conversion, by Dijkstra's shunting-yard algorithm.
'''

import logging

from .lexer import Token, TokenType
from .registry import Operator
from .util import ExpressionSyntaxError


logger = logging.getLogger(__name__)


NEGATE = Token(TokenType.OPERATOR, Operator.NEGATE)


class Parser:
    '''
    Operator-precedence parser producing postfix token order.

    Holds no state between calls to parse.
    '''

    OPERANDS = {TokenType.NUMBER, TokenType.CONSTANT, TokenType.VARIABLE}
    # What a '-' may follow and still be a negation rather than a subtraction.
    PREFIX_CONTEXT = {TokenType.OPERATOR, TokenType.OPENING, TokenType.COMMA,
                      TokenType.FUNCTION}

    def parse(self, tokens):
        '''
        Return tokens reordered into RPN.

        :param tokens: Infix tokens, as produced by the lexer.
        '''
        output = []
        stack = []
        previous = None
        for token in tokens:
            if token.type in type(self).OPERANDS:
                output.append(token)
            elif token.type in (TokenType.FUNCTION, TokenType.OPENING):
                stack.append(token)
            elif token.type is TokenType.OPERATOR:
                self._operator(self._disambiguate(token, previous),
                               output, stack)
            elif token.type is TokenType.COMMA:
                self._comma(output, stack)
            elif token.type is TokenType.CLOSING:
                self._closing(output, stack)
            previous = token

        while stack:
            top = stack.pop()
            if top.type in (TokenType.OPENING, TokenType.CLOSING):
                raise ExpressionSyntaxError('Mismatched parentheses')
            output.append(top)
        return output

    def isprefix(self, previous):
        '''
        Return True if an operator after previous has no left operand.
        '''
        if previous is None:
            return True
        if previous.type is TokenType.OPERATOR:
            # 3!-1 is a subtraction even though - follows an operator; the
            # factorial already closed its operand.
            return not previous.value.ispostfix
        return previous.type in type(self).PREFIX_CONTEXT

    def _disambiguate(self, token, previous):
        if token.value is Operator.SUBTRACT and self.isprefix(previous):
            return NEGATE
        return token

    def _operator(self, token, output, stack):
        # A prefix operator has nothing to its left that could be reduced.
        if not token.value.isprefix:
            while stack:
                top = stack[-1]
                if top.type is TokenType.FUNCTION:
                    output.append(stack.pop())
                elif (top.type is TokenType.OPERATOR and
                      token.value.yields_to(top.value)):
                    output.append(stack.pop())
                else:
                    break
        stack.append(token)

    def _comma(self, output, stack):
        while stack and stack[-1].type is not TokenType.OPENING:
            output.append(stack.pop())
        if not stack:
            raise ExpressionSyntaxError(
                'Misplaced comma or mismatched parentheses')

    def _closing(self, output, stack):
        while stack:
            top = stack.pop()
            if top.type is TokenType.OPENING:
                break
            output.append(top)
        else:
            raise ExpressionSyntaxError('Mismatched parentheses')
        if stack and stack[-1].type is TokenType.FUNCTION:
            output.append(stack.pop())


def parse(tokens):
    '''
    Return tokens in RPN order.
    '''
    rpn = Parser().parse(tokens)
    logger.debug('rpn: %s', [token.value for token in rpn])
    return rpn
