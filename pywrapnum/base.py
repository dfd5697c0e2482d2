#!/usr/bin/env python
# -*- coding: utf-8 -*-

import operator

import numpy as np

'''
Stateless functions for inclusive-range wraparound, used throughout the
wrapping number class and the tape interpreter.
'''


class InvalidRangeError(ValueError):
    '''
    An inverted or empty [min, max] range, raised at construction time.
    '''


def calc_range_width(min_value, max_value):
    '''
    Number of distinct values in the inclusive range [min_value, max_value].
    '''
    min_value, max_value = operator.index(min_value), operator.index(max_value)
    if max_value < min_value:
        raise InvalidRangeError(f"Maximum {max_value} is less than minimum {min_value}")
    return max_value - min_value + 1


def calc_wrapped(value, min_value, max_value):
    '''
    Wrap an arbitrary integer into [min_value, max_value]. Python's % is a floor
    modulo on unbounded ints, so negative and multi-wrap offsets land in range in
    a single step.
    '''
    min_value = operator.index(min_value)
    width = calc_range_width(min_value, max_value)
    return min_value + ((operator.index(value) - min_value) % width)


def calc_bounds(*args):
    '''
    Canonical (min, max) bounds from any of the three construction forms:
        calc_bounds(n)                -> (0, n - 1)
        calc_bounds(lo, hi)           -> (lo, hi)
        calc_bounds(range(lo, hi + 1)) -> (lo, hi)
    '''
    if len(args) == 1 and isinstance(args[0], range):
        bounds = args[0]
        if bounds.step != 1:
            raise InvalidRangeError(f"Range step must be 1, not {bounds.step}")
        if len(bounds) == 0:
            raise InvalidRangeError(f"Empty {bounds!r}")
        return bounds.start, bounds.stop - 1

    if len(args) == 1:
        size = operator.index(args[0])
        if size <= 0:
            raise InvalidRangeError(f"Size must be positive, not {size}")
        return 0, size - 1

    if len(args) == 2:
        min_value, max_value = operator.index(args[0]), operator.index(args[1])
        calc_range_width(min_value, max_value)
        return min_value, max_value

    raise TypeError(f"Expected a size, a (min, max) pair or a range, got {len(args)} arguments")


def wrap_array(values, min_value, max_value):
    '''
    Vectorized wraparound of an integer array into [min_value, max_value],
    returned as an int64 array. The arithmetic runs on Python ints in an object
    array, so only bounds that cannot be stored as int64 overflow.
    '''
    min_value = operator.index(min_value)
    width = calc_range_width(min_value, max_value)

    info = np.iinfo(np.int64)
    if min_value < info.min or operator.index(max_value) > info.max:
        raise OverflowError(f"Range {min_value}..={max_value} does not fit in int64")

    arr = np.asarray(values)
    if arr.size == 0:
        return np.empty(arr.shape, dtype=np.int64)
    if arr.dtype.kind not in 'iu':
        raise TypeError(f"Expected an integer array, got {arr.dtype} values")

    shifted = arr.astype(object) - min_value
    return (np.mod(shifted, width) + min_value).astype(np.int64)
