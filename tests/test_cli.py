'''
Command line interface tests
'''

from scicalc import CLI

from pytest import raises


def run(capsys, *args):
    CLI().run(args=list(args))
    return capsys.readouterr()


def test_evaluate(capsys):
    out, err = run(capsys, '-e', '2+3*4')
    assert out == '14\n'
    assert err == ''


def test_ans_carries_over(capsys):
    out, _ = run(capsys, '-e', '2+3', 'Ans*2', '')
    assert out.splitlines() == ['5', '10', '10']


def test_errors_do_not_stop(capsys):
    out, err = run(capsys, '-e', '1+', '(1', '2')
    assert out == '2\n'
    assert err.splitlines() == ['Less than 2 element(s) on stack',
                                'Mismatched parentheses']


def test_failed_line_keeps_ans(capsys):
    out, _ = run(capsys, '-e', '7', 'y', 'Ans')
    assert out.splitlines() == ['7', '7']


def test_degrees(capsys):
    out, _ = run(capsys, '-d', '-e', 'sin(90)')
    assert out == '1\n'


def test_radians(capsys):
    out, _ = run(capsys, '-r', '-e', 'cos(0)')
    assert out == '1\n'


def test_dump(capsys):
    out, _ = run(capsys, '-D', '-e', '2x')
    assert out.splitlines() == [
        '[type]\t<value>',
        'number\t2',
        'operator\t*',
        'variable\tx',
        'rpn\t2\tx\t*',
    ]


def test_table(capsys):
    out, _ = run(capsys, '-T', '0', '2', '1', '-e', 'x^2')
    assert out.splitlines() == ['x\tx^2', '0\t0', '1\t1', '2\t4']


def test_table_errors(capsys):
    out, _ = run(capsys, '-T', '-1', '1', '1', '-e', '1/x', 'y')
    assert out.splitlines() == [
        'x\t1/x', '-1\t-1', '0\tError', '1\t1',
        'x\ty', '-1\tError', '0\tError', '1\tError',
    ]


def test_table_needs_positive_step(capsys):
    with raises(SystemExit):
        run(capsys, '-T', '0', '1', '0', '-e', 'x')


def test_stats(capsys):
    out, _ = run(capsys, '-S', '-e', '1 2, 3 4 5')
    lines = dict(line.split('\t') for line in out.splitlines())
    assert lines['count'] == '5'
    assert lines['mean'] == '3'
    assert lines['median'] == '3'
    assert lines['std_dev'] == '1.4142135624'
    assert lines['sample_std_dev'] == '1.5811388301'


def test_stats_bad_input(capsys):
    out, err = run(capsys, '-S', '-e', '1 two 3')
    assert out == ''
    assert err.startswith('Cannot parse numbers')


def test_determinant(capsys):
    out, _ = run(capsys, '--det', '-e', '1 2; 3 4')
    assert out == '-2\n'


def test_inverse(capsys):
    out, _ = run(capsys, '--inv', '-e', '4 7; 2 6')
    assert out.splitlines() == ['0.6\t-0.7', '-0.2\t0.4']


def test_singular_inverse(capsys):
    out, err = run(capsys, '--inv', '-e', '1 2; 2 4')
    assert out == ''
    assert err == 'Matrix is singular\n'


def test_ragged_matrix(capsys):
    _, err = run(capsys, '--det', '-e', '1 2; 3')
    assert 'same length' in err


def test_actions_exclusive(capsys):
    with raises(SystemExit):
        run(capsys, '-S', '--det', '-e', '1')
