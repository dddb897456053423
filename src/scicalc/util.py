from functools import wraps
import math


class CalculatorError(Exception):
    pass


class LexError(CalculatorError):
    pass


class ExpressionSyntaxError(CalculatorError):
    pass


class DomainError(CalculatorError):
    pass


class UnknownVariableError(CalculatorError):
    pass


class InvalidExpressionError(CalculatorError):
    pass


class DimensionError(CalculatorError):
    pass


class SingularMatrixError(CalculatorError):
    pass


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts exceptions to calculator errors.

    Passes through CalculatorErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except Exception as e:
                raise CalculatorError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def ieee(f):
    '''
    Make a math function behave like IEEE 754 instead of raising.

    Domain errors become nan, overflow becomes inf. Callers that care about
    the sign of an overflow must handle it themselves.
    '''
    @wraps(f)
    def wrapper(*args):
        try:
            return f(*args)
        except OverflowError:
            return math.inf
        except (ValueError, ZeroDivisionError):
            return math.nan
    return wrapper
