from os import isatty
import sys
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import math

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
import regex

from . import config
from .context import EvaluationContext
from .expression import evaluate_expression
from .formatting import format_number
from .lexer import TokenType, tokenize
from .matrix import determinant, format_matrix, inverse
from .parser import parse
from .registry import AngleMode
from .stats import compute_statistics
from .util import CalculatorError, wrap_user_errors


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, rprompt=None):
        self.prompt = prompt
        self.rprompt = rprompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Session only; calculator state isn't
                                    # persisted.
                                    history=InMemoryHistory(),
                                    # Angle mode
                                    rprompt=self.rprompt,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = config.PROMPT
    # Separates numbers in --stats lines and matrix rows.
    SEPARATOR = regex.compile(r'[\s,]+')
    ROW_SEPARATOR = ';'

    def executor(self):
        '''
        Evaluate each line, carrying the result over as Ans.
        '''
        ans = 0
        for line in self.args.expressions:
            try:
                ans = evaluate_expression(line, self._context(ans))
            except CalculatorError as e:
                self._report(line, e)
            else:
                print(format_number(ans))

    def dumper(self):
        '''
        Dump tokens and RPN of each line.
        '''
        print('[type]\t<value>')
        for line in self.args.expressions:
            try:
                tokens = tokenize(line)
                for token in tokens:
                    print(token.type.value, self._describe(token), sep='\t')
                print('rpn', *map(self._describe, parse(tokens)), sep='\t')
            except CalculatorError as e:
                self._report(line, e)

    def tabulate(self):
        '''
        Evaluate each line over a range of x.
        '''
        start, stop, step = self.args.table
        count = math.floor((stop - start) / step + 1e-9) + 1
        for line in self.args.expressions:
            if not line.strip():
                continue
            print('x', line.strip(), sep='\t')
            for i in range(max(count, 0)):
                x = start + i * step
                try:
                    y = format_number(
                        evaluate_expression(line, self._context(x=x)))
                except CalculatorError as e:
                    logger.debug('x = %r: %s', x, e.args[0])
                    y = 'Error'
                print(format_number(x), y, sep='\t')

    def summarize(self):
        '''
        Print descriptive statistics of each line of numbers.
        '''
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                result = compute_statistics(self._numbers(line))
            except CalculatorError as e:
                self._report(line, e)
                continue
            if result is None:
                print('No values', file=sys.stderr)
                continue
            for field, value in result._asdict().items():
                print(field, format_number(value), sep='\t')

    def determinants(self):
        '''
        Print determinant of each line's matrix.
        '''
        self._matrices(lambda matrix: format_number(determinant(matrix)))

    def inverses(self):
        '''
        Print inverse of each line's matrix.
        '''
        self._matrices(lambda matrix: format_matrix(inverse(matrix)))

    def _matrices(self, f):
        for line in self.args.expressions:
            if not line.strip():
                continue
            try:
                print(f(self._matrix(line)))
            except CalculatorError as e:
                self._report(line, e)

    @wrap_user_errors('Cannot parse numbers {1!r}')
    def _numbers(self, line):
        return [float(value)
                for value
                in type(self).SEPARATOR.split(line.strip())
                if value]

    @wrap_user_errors('Cannot parse matrix {1!r}')
    def _matrix(self, line):
        return [self._numbers(row)
                for row
                in line.strip().split(type(self).ROW_SEPARATOR)]

    def _context(self, ans=0, **variables):
        return EvaluationContext(angle_mode=self.args.angle_mode,
                                 ans=ans,
                                 variables=variables)

    def _describe(self, token):
        if token.type is TokenType.OPERATOR:
            return token.value.symbol
        elif token.type is TokenType.FUNCTION:
            return token.value.keyword
        elif token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            return format_number(token.value)
        return str(token.value)

    def _report(self, line, e):
        logger.debug('Failed on %r', line, exc_info=True)
        print(e.args[0], file=sys.stderr)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    rprompt=self.args.angle_mode.value)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Scientific calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        angle_groups = self.argument_parser.add_mutually_exclusive_group()
        angle_groups.add_argument('-d', '--degrees',
                                  action='store_const',
                                  const=AngleMode.DEG,
                                  dest='angle_mode')
        angle_groups.add_argument('-r', '--radians',
                                  action='store_const',
                                  const=AngleMode.RAD,
                                  dest='angle_mode')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-D', '--dump', self.dumper),
                                      ('-S', '--stats', self.summarize),
                                      (None, '--det', self.determinants),
                                      (None, '--inv', self.inverses)]:
            flags = [flag for flag in (short_, long_) if flag]
            main_groups.add_argument(*flags,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        main_groups.add_argument('-T', '--table',
                                 nargs=3,
                                 type=float,
                                 metavar=('START', 'STOP', 'STEP'))
        self.argument_parser.set_defaults(action=self.executor,
                                          angle_mode=AngleMode(
                                              config.ANGLE_MODE),
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(format=config.LOG_FORMAT,
                            level=logging.DEBUG if self.args.verbose
                            else config.LOG_LEVEL)
        if self.args.table is not None:
            if self.args.table[2] <= 0:
                self.argument_parser.error('STEP must be positive')
            self.args.action = self.tabulate
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
