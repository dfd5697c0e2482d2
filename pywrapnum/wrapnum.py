#!/usr/bin/env python
# -*- coding: utf-8 -*-

import operator

from pywrapnum.base import InvalidRangeError, calc_bounds


def _as_int(o):
    '''
    Reduce an int-like operand (int, numpy integer, WrapNum) to a plain int, or
    None for anything else so the dunders can hand back NotImplemented.
    '''
    try:
        return operator.index(o)
    except TypeError:
        return None


class WrapNum:
    '''
    Integer that wraps around an arbitrary, inclusive [min, max] range whenever it
    is added to or subtracted from, so it can be used like any other number
    without ever applying the modulo by hand.
    '''

    __slots__ = ('_value', '_min', '_max')

    def __init__(self, *bounds, value=None):
        '''
        Initialize the number with one of three forms of bounds, and an optional
        starting value.
        :param bounds: A size `n` for 0..=n-1, a `(min, max)` pair, or an inclusive
        range spelled `range(min, max + 1)`.
        :param value: Starting value, defaults to the minimum. Values outside of the
        range are wrapped into it.
        '''
        min_value, max_value = calc_bounds(*bounds)
        self._build(min_value, max_value, min_value if value is None else value)

    def _build(self, min_value, max_value, value):
        # bounds come pre-checked from calc_bounds, or from an existing number
        self._min = min_value
        self._max = max_value
        self._value = min_value + ((operator.index(value) - min_value) % (max_value - min_value + 1))

    @classmethod
    def _new(cls, min_value, max_value, value=None):
        new = object.__new__(cls)
        new._build(min_value, max_value, min_value if value is None else value)
        return new

    @classmethod
    def from_size(cls, size, value=None):
        return cls._new(*calc_bounds(size), value=value)

    @classmethod
    def from_bounds(cls, min_value, max_value, value=None):
        return cls._new(*calc_bounds(min_value, max_value), value=value)

    @classmethod
    def from_range(cls, bounds, value=None):
        return cls._new(*calc_bounds(bounds), value=value)

    def _with_value(self, value):
        return self._new(self._min, self._max, value)

    @property
    def value(self):
        return self._value

    @property
    def min(self):
        return self._min

    @property
    def max(self):
        return self._max

    @property
    def width(self):
        return self._max - self._min + 1

    def __repr__(self):
        return f"wrap{self._value}({self._min}..={self._max})"

    def __str__(self):
        return str(self._value)

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self._value.__format__(*fmt_args)

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __bool__(self):
        return self._value != 0

    def __hash__(self):
        return hash(self._value)

    '''
    Comparisons only look at the value, the bounds are metadata. They cannot wrap,
    so just use the underlying Python int() operators.
    '''
    def __eq__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._value == o

    def __ne__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._value != o

    def __lt__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._value < o

    def __le__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._value <= o

    def __gt__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._value > o

    def __ge__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._value >= o

    def add(self, delta):
        '''
        New number with the same bounds, moved forward by `delta` and wrapped.
        '''
        return self._with_value(self._value + operator.index(delta))

    def subtract(self, delta):
        return self.add(-operator.index(delta))

    def increment(self):
        return self.add(1)

    def decrement(self):
        return self.add(-1)

    def __add__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self.add(o)

    def __sub__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self.subtract(o)

    def __radd__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self.add(o)

    def __rsub__(self, o):
        o = _as_int(o)
        return NotImplemented if o is None else self._with_value(o - self._value)


class WrapByte(WrapNum):
    '''
    Common unsigned 8-bit cell, wrapping 255 -> 0 and 0 -> 255.
    '''

    __slots__ = ()

    def __init__(self, value=None):
        super().__init__(0, 255, value=value)

    @classmethod
    def _new(cls, min_value, max_value, value=None):
        if (min_value, max_value) != (0, 255):
            raise InvalidRangeError(f"{cls.__name__} is always 0..=255, not {min_value}..={max_value}")
        return super()._new(min_value, max_value, value=value)


def wrap(*bounds, value=None):
    '''
    Shorthand for building a WrapNum:
        wrap(12)                   -> 0..=11
        wrap(5, 30)                -> 5..=30
        wrap(range(5, 31))         -> 5..=30
        wrap(5, 30, value=17)      -> 17 in 5..=30
    '''
    return WrapNum(*bounds, value=value)
