#!/usr/bin/env python3

# approx-norm -- A linear approximation of the length of a 2D vector
# Copyright 2016 Ruud van Asseldonk

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.

# The goal is to approximate the length of a 2D vector, sqrt(x^2 + y^2), with
# the linear function a*x + b*y on the square domain (-1, 1) x (-1, 1). This
# module measures how good a given pair (a, b) is:
#
#  * total error: sum of |sqrt(x^2 + y^2) - (a*x + b*y)| over the sample grid.
#  * error extrema: the lowest and highest signed error.
#  * percent extrema: the lowest and highest approx / exact ratio, times 100.
#
# The origin is skipped, the ratio is undefined there.

from collections import namedtuple

import numpy
from mpmath import mp, fabs, sqrt

mp.prec = 64

ITER_MIN = -1.0
ITER_MAX = 1.0
ITER_STEPS = 100

_ErrorStats = namedtuple('ErrorStats', [
    'total_error',
    'max_error',
    'min_error',
    'max_percent_error',
    'min_percent_error',
])

class ErrorStats(_ErrorStats):
    # An extremum is None until at least one point has been sampled.
    __slots__ = ()

    def __new__(cls, total_error=0.0, max_error=None, min_error=None,
                max_percent_error=None, min_percent_error=None):
        return super().__new__(cls, total_error, max_error, min_error,
                               max_percent_error, min_percent_error)

    def is_empty(self):
        return self.max_error is None

    def __str__(self):
        return ('total_error: {} max_error: {} min_error: {} '
                'max_percent_error: {} min_percent_error: {}').format(
            *(format_value(v, 2) for v in self))

def format_value(value, digits=3):
    if value is None:
        return 'nan'
    return '{:.{}f}'.format(value, digits)

def f(x, y):
    return numpy.sqrt(x**2 + y**2)

def f_approximation(x, y, a, b):
    return a * x + b * y

def spaced(iter_min, iter_max, iter_step):
    # iter_step points from iter_min to iter_max, both ends included.
    if iter_step < 0:
        raise ValueError('sample count must not be negative, got {}'.format(iter_step))
    return numpy.linspace(iter_min, iter_max, iter_step)

def evaluate(a, b, iter_min=ITER_MIN, iter_max=ITER_MAX, iter_step=ITER_STEPS,
             f=f, approx_f=f_approximation):
    xs = spaced(iter_min, iter_max, iter_step)
    x, y = numpy.meshgrid(xs, xs, indexing='ij')

    true_output = f(x, y)
    approx_output = approx_f(x, y, a, b)

    keep = true_output != 0.0
    true_output = true_output[keep]
    approx_output = approx_output[keep]
    if true_output.size == 0:
        return ErrorStats()

    error = true_output - approx_output
    percent_error = approx_output / true_output

    return ErrorStats(
        total_error=float(numpy.abs(error).sum()),
        max_error=float(error.max()),
        min_error=float(error.min()),
        max_percent_error=float(percent_error.max()) * 100.0,
        min_percent_error=float(percent_error.min()) * 100.0,
    )

def precise_error(a, b, iter_min=ITER_MIN, iter_max=ITER_MAX, iter_step=ITER_STEPS):
    # Same total as evaluate(), but summed in mpmath to check the float result.
    if iter_step < 0:
        raise ValueError('sample count must not be negative, got {}'.format(iter_step))
    if iter_step == 0:
        return mp.mpf(0)
    a, b = mp.mpf(a), mp.mpf(b)
    xs = mp.linspace(iter_min, iter_max, iter_step)
    total = mp.mpf(0)
    for x in xs:
        for y in xs:
            exact = sqrt(x**2 + y**2)
            if exact == 0:
                continue
            total += fabs(exact - (a * x + b * y))
    return total
