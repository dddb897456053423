'''
Defaults for the calculator.

Numeric constants are fixed. The front end defaults can be overridden with
SCICALC_ environment variables; the engine itself never reads them.
'''

import os


# Front end
ANGLE_MODE = os.getenv('SCICALC_ANGLE_MODE', 'RAD').upper()
PROMPT = os.getenv('SCICALC_PROMPT', '> ')
LOG_LEVEL = os.getenv('SCICALC_LOG_LEVEL', 'WARNING').upper()
LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'

# Pivots smaller than this make a matrix singular
SINGULAR_TOLERANCE = 1e-12
# How far from an integer a factorial operand may be
FACTORIAL_TOLERANCE = 1e-9
# 171! no longer fits in a float
MAX_FACTORIAL = 170

# Display
SCIENTIFIC_UPPER = 1e9
SCIENTIFIC_LOWER = 1e-4
EXPONENT_DIGITS = 6
ROUND_DIGITS = 10
