# -*- coding: utf-8 -*-

'''

    lazylayer util: datastructures

    holds small datastructures shared across the :py:mod:`lazylayer` API.

'''


class Sentinel(object):

    ''' Create a named sentinel object. '''

    __slots__ = ('name', '_falsy')

    def __init__(self, name, falsy=False):

        ''' Construct a new sentinel.

            :param name: Name shown in the sentinel's ``repr``.
            :param falsy: Whether the sentinel should test as ``False``.
            :returns: ``None``. '''

        self.name, self._falsy = name, falsy

    def __repr__(self):

        ''' Represent this sentinel as a string. '''

        return '<Sentinel "%s">' % self.name

    def __bool__(self):

        ''' Test whether this sentinel is falsy. '''

        return (not self._falsy)


# Sentinels
_EMPTY = Sentinel("EMPTY", True)  # marks "no value found" and "no default declared"
