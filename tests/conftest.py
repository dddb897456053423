from pytest import Item, fixture

from scicalc import EvaluationContext, Lexer, Parser


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def lexer():
    return Lexer()


@fixture
def parser():
    return Parser()


@fixture
def degrees():
    return EvaluationContext(angle_mode='DEG')
