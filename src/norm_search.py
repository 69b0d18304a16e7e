#!/usr/bin/env python3

# approx-norm -- A linear approximation of the length of a 2D vector
# Copyright 2016 Ruud van Asseldonk

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3. A copy
# of the License is available in the root of the repository.

# Find a and b such that a*x + b*y is as close as possible to sqrt(x^2 + y^2)
# on (-1, 1) x (-1, 1), measured by the total absolute error on a sample grid.
# There are two searches:
#
#  * brute_force_search tries every pair on a fixed grid over (a, b).
#  * monte_carlo_descent jumps around randomly from the best point so far, and
#    halves the jump size after every stage.
#
# Running this file runs the descent.
#
# With strict_fidelity the searches behave exactly like the first version of
# this tool did: a total error of 0 means "nothing found yet", and when the
# descent improves it moves both a and b to the new b. Without it, the best
# point is unset until the first evaluation and a and b move independently.

import random
from collections import namedtuple

from norm_error import ITER_MAX, ITER_MIN, ITER_STEPS, ErrorStats, evaluate, format_value, spaced

PARAM_MIN = -1.0
PARAM_MAX = 1.0
PARAM_STEPS = 100

DESCENT_STEPS = 20
DESCENT_SUB_STEPS = 100

STRICT_FIDELITY = False

Best = namedtuple('Best', ['a', 'b', 'stats'])

DescentResult = namedtuple('DescentResult', ['a', 'b', 'stats', 'deltas'])

def is_improvement(best, stats, strict_fidelity=STRICT_FIDELITY):
    if strict_fidelity:
        # Note: a perfect fit also has a total error of 0.
        return best.stats.total_error == 0.0 or stats.total_error < best.stats.total_error
    return best is None or stats.total_error < best.stats.total_error

def improve(best, a, b, stats, strict_fidelity=STRICT_FIDELITY):
    if is_improvement(best, stats, strict_fidelity):
        return Best(a, b, stats)
    return best

def unset_best(strict_fidelity=STRICT_FIDELITY):
    if strict_fidelity:
        return Best(0.0, 0.0, ErrorStats())
    return None

def brute_force_search(param_min=PARAM_MIN, param_max=PARAM_MAX, param_steps=PARAM_STEPS,
                       iter_min=ITER_MIN, iter_max=ITER_MAX, iter_steps=ITER_STEPS,
                       strict_fidelity=STRICT_FIDELITY, progress=True):
    best = unset_best(strict_fidelity)
    for a in spaced(param_min, param_max, param_steps):
        for b in spaced(param_min, param_max, param_steps):
            stats = evaluate(a, b, iter_min, iter_max, iter_steps)
            best = improve(best, float(a), float(b), stats, strict_fidelity)

    # An empty sweep.
    if best is None:
        best = Best(0.0, 0.0, ErrorStats())

    if progress:
        print_best(best.a, best.b, best.stats, iter_steps * iter_steps)
    return best

def monte_carlo_descent(param_min=PARAM_MIN, param_max=PARAM_MAX,
                        param_steps=DESCENT_STEPS, param_sub_steps=DESCENT_SUB_STEPS,
                        iter_min=ITER_MIN, iter_max=ITER_MAX, iter_steps=ITER_STEPS,
                        rng=None, strict_fidelity=STRICT_FIDELITY, progress=True):
    if rng is None:
        rng = random.Random()

    delta = (abs(param_max) + abs(param_min)) / 2.0
    a = param_max + param_min / 2.0
    b = param_max + param_min / 2.0

    best = unset_best(strict_fidelity)
    deltas = []

    for _ in range(param_steps):
        deltas.append(delta)
        for _ in range(param_sub_steps):
            this_a = a + rng.uniform(-delta, delta)
            this_b = b + rng.uniform(-delta, delta)
            stats = evaluate(this_a, this_b, iter_min, iter_max, iter_steps)

            if not is_improvement(best, stats, strict_fidelity):
                continue

            if strict_fidelity:
                a = this_b
                b = this_b
            else:
                a = this_a
                b = this_b
            best = Best(a, b, stats)

            if progress:
                print('new best error: {:.3f}'.format(stats.total_error))
                print('new best a and b: {:.3f}, {:.3f}'.format(this_a, this_b))
        delta /= 2.0

    stats = best.stats if best is not None else ErrorStats()
    return DescentResult(a, b, stats, deltas)

def print_best_error_stats(stats, total_iters):
    avg_error = stats.total_error / total_iters if total_iters else None

    print('avg error: {}'.format(format_value(avg_error)))
    print('lowest p error: {}% / highest p error: {}%'.format(
        format_value(stats.min_percent_error), format_value(stats.max_percent_error)))
    print('lowest error: {} / highest error: {}'.format(
        format_value(stats.min_error), format_value(stats.max_error)))

def print_best(a, b, stats, total_iters):
    print('\n\nbest a and b: {:.3f}, {:.3f}'.format(a, b))
    print_best_error_stats(stats, total_iters)

def main(rng=None):
    result = monte_carlo_descent(rng=rng)
    print_best(result.a, result.b, result.stats, ITER_STEPS * ITER_STEPS)
    return 0

if __name__ == '__main__':
    main()
