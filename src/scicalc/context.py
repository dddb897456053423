import math

from .registry import AngleMode
from .util import CalculatorError


class EvaluationContext:
    '''
    Everything an expression may depend on besides its own text.

    :param angle_mode: AngleMode, or its name ('RAD' or 'DEG', any case).
    :param ans: Value of Ans, normally the previous result.
    :param variables: Mapping of case-sensitive variable names to values.
    '''

    def __init__(self, angle_mode=AngleMode.RAD, ans=0, variables=None):
        self.angle_mode = self._angle_mode(angle_mode)
        self.ans = ans
        self.variables = dict(variables or {})

    @staticmethod
    def _angle_mode(angle_mode):
        if isinstance(angle_mode, str):
            angle_mode = angle_mode.upper()
        try:
            return AngleMode(angle_mode)
        except ValueError:
            raise CalculatorError(
                'Unknown angle mode: {!r}'.format(angle_mode)) from None

    def defaults(self):
        '''
        Return the bindings every expression can rely on.
        '''
        return {
            'Ans': self.ans,
            'pi': math.pi,
            '\N{GREEK SMALL LETTER PI}': math.pi,
            'e': math.e,
        }

    def bindings(self):
        '''
        Return all variable bindings; caller variables shadow the defaults.
        '''
        bindings = self.defaults()
        bindings.update(self.variables)
        return bindings

    def __repr__(self):
        return '{}(angle_mode={}, ans={!r}, variables={!r})'.format(
            type(self).__name__, self.angle_mode.value, self.ans,
            self.variables)
