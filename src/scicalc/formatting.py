import math

import regex

from . import config


# Python pads exponents to two digits; displays don't.
_EXPONENT = regex.compile(r'e([+-])0*(?=\d)')


def format_number(value):
    '''
    Render number for display.

    Non-finite values render as 'Error'. Very large and very small magnitudes
    switch to scientific notation; everything else is rounded to a fixed
    number of decimal places and printed without trailing zeros.
    '''
    value = float(value)
    if not math.isfinite(value):
        return 'Error'
    magnitude = abs(value)
    if (magnitude >= config.SCIENTIFIC_UPPER or
            0 < magnitude <= config.SCIENTIFIC_LOWER):
        text = '{:.{}e}'.format(value, config.EXPONENT_DIGITS)
        return _EXPONENT.sub(r'e\1', text)
    rounded = round(value, config.ROUND_DIGITS)
    if rounded.is_integer():
        # Also turns -0.0 into 0.
        return str(int(rounded))
    return repr(rounded)
