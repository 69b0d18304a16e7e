#!/usr/bin/env python3

# approx-norm -- A linear approximation of the length of a 2D vector
# Copyright 2016 Ruud van Asseldonk

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.

# The descent in norm_search.py stops after a fixed number of stages. Start
# from its result and let scipy finish the job, then check the total error once
# more with mpmath.
#
# The total absolute error is not differentiable everywhere, so use a
# derivative-free method.

from mpmath import nstr
from scipy.optimize import minimize

from norm_error import ITER_MAX, ITER_MIN, ITER_STEPS, evaluate, precise_error
from norm_search import monte_carlo_descent, print_best

def polish(a, b, iter_min=ITER_MIN, iter_max=ITER_MAX, iter_steps=ITER_STEPS, progress=True):
    def error(coefs):
        (a, b) = coefs
        err = evaluate(a, b, iter_min, iter_max, iter_steps).total_error
        if progress:
            print('(a, b): ({}, {})'.format(a, b))
            print('evaluated error: ', err)
            print()
        return err

    coefs = minimize(error, (a, b), method='Nelder-Mead').x
    a, b = float(coefs[0]), float(coefs[1])
    stats = evaluate(a, b, iter_min, iter_max, iter_steps)
    return a, b, stats

def main(rng=None):
    result = monte_carlo_descent(rng=rng, progress=False)
    a, b, stats = polish(result.a, result.b, progress=False)
    print_best(a, b, stats, ITER_STEPS * ITER_STEPS)
    print('total error: {:.3f}'.format(stats.total_error))
    print('precise total error: {}'.format(nstr(precise_error(a, b), 12)))
    return 0

if __name__ == '__main__':
    main()
