'''
Dense matrix arithmetic on lists of rows.

Matrices are plain lists of equally long lists of numbers. Every operation
checks shapes before doing any work and returns a new matrix; inputs are never
modified.
'''

import logging

from . import config
from .formatting import format_number
from .util import DimensionError, SingularMatrixError


logger = logging.getLogger(__name__)


def shape(matrix):
    '''
    Return (rows, columns) of matrix, failing on empty or ragged ones.
    '''
    if not matrix or not matrix[0]:
        raise DimensionError('Matrix must have at least one row and column')
    columns = len(matrix[0])
    for row in matrix:
        if len(row) != columns:
            raise DimensionError('Matrix rows must all have the same length')
    return len(matrix), columns


def _square(matrix, operation):
    rows, columns = shape(matrix)
    if rows != columns:
        raise DimensionError(
            '{} defined for square matrices'.format(operation))
    return rows


def create_matrix(rows, cols, fill=0):
    '''
    Return rows × cols matrix with every element set to fill.
    '''
    if not (isinstance(rows, int) and isinstance(cols, int)) or \
       rows < 1 or cols < 1:
        raise DimensionError(
            'Invalid matrix dimensions {!r} × {!r}'.format(rows, cols))
    return [[fill for _ in range(cols)] for _ in range(rows)]


def _elementwise(a, b, f):
    if shape(a) != shape(b):
        raise DimensionError('Matrices must have the same dimensions')
    return [[f(left, right) for left, right in zip(row_a, row_b)]
            for row_a, row_b in zip(a, b)]


def add_matrices(a, b):
    return _elementwise(a, b, lambda left, right: left + right)


def subtract_matrices(a, b):
    return _elementwise(a, b, lambda left, right: left - right)


def multiply_matrices(a, b):
    '''
    Return matrix product a · b.
    '''
    rows, inner = shape(a)
    inner_b, columns = shape(b)
    if inner != inner_b:
        raise DimensionError('Columns of A must match rows of B')
    return [[sum(a[r][k] * b[k][c] for k in range(inner))
             for c in range(columns)]
            for r in range(rows)]


def determinant(matrix):
    '''
    Return determinant of square matrix, by cofactor expansion.

    Expansion along the first row takes O(n!) time. That's fine for the small
    matrices a calculator deals with; anything much beyond 8 × 8 should use an
    LU decomposition instead.
    '''
    n = _square(matrix, 'Determinant')
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]
    total = 0
    for c in range(n):
        minor = [row[:c] + row[c + 1:] for row in matrix[1:]]
        sign = 1 if c % 2 == 0 else -1
        total += sign * matrix[0][c] * determinant(minor)
    return total


def inverse(matrix):
    '''
    Return inverse of square matrix.

    Gauss-Jordan elimination on [A | I] with partial pivoting: each column's
    pivot is the largest magnitude candidate at or below the diagonal.
    '''
    n = _square(matrix, 'Inverse')
    augmented = [[float(value) for value in row] +
                 [1.0 if i == j else 0.0 for j in range(n)]
                 for i, row in enumerate(matrix)]

    for col in range(n):
        pivot_row = max(range(col, n), key=lambda row: abs(augmented[row][col]))
        if abs(augmented[pivot_row][col]) < config.SINGULAR_TOLERANCE:
            raise SingularMatrixError('Matrix is singular')
        if pivot_row != col:
            logger.debug('swapping rows %d and %d', col, pivot_row)
            augmented[col], augmented[pivot_row] = \
                augmented[pivot_row], augmented[col]

        pivot = augmented[col][col]
        augmented[col] = [value / pivot for value in augmented[col]]
        for row in range(n):
            if row == col:
                continue
            factor = augmented[row][col]
            if factor:
                augmented[row] = [value - factor * reduced
                                  for value, reduced
                                  in zip(augmented[row], augmented[col])]

    return [row[n:] for row in augmented]


def format_matrix(matrix):
    '''
    Render matrix as tab separated columns, one row per line.
    '''
    return '\n'.join('\t'.join(format_number(value) for value in row)
                     for row in matrix)
