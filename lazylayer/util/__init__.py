# -*- coding: utf-8 -*-

'''

    lazylayer util

    holds small utilities that don't belong anywhere specific, most
    notably the ``Transformer`` bundle applied to resolved property values.

'''


## Base Imports
import operator

## Transformer
# Closed tagged union of the ways a property value can be transformed.
class Transformer(tuple):

    ''' Named-tuple class for ``(kind, target)`` transformer bundles. '''

    __slots__ = tuple()

    NONE, SELECTOR, FUNCTION = 'none', 'selector', 'function'

    def __new__(_cls, kind, target=None):

        ''' Create a new `Transformer` instance. '''

        return tuple.__new__(_cls, (kind, target))

    @classmethod
    def build(cls, spec):

        ''' Build a transformer from a declaration's ``transform`` option.

            :param spec: ``None``, a method name or a callable. Anything
            else is not applied, and builds a ``NONE`` transformer.
            :returns: A ``Transformer``. '''

        if isinstance(spec, cls):
            return spec
        if spec is None:
            return cls(cls.NONE)
        if isinstance(spec, str):
            return cls(cls.SELECTOR, spec)
        if callable(spec):
            return cls(cls.FUNCTION, spec)
        return cls(cls.NONE)

    def __call__(self, value, context):

        ''' Apply this transformer to ``value``, with ``context`` as the owning instance. '''

        kind, target = self
        if kind == self.SELECTOR:
            return getattr(value, target)()
        if kind == self.FUNCTION:
            return target(value, context)
        return value

    # util: generate a string representation of this `Transformer`
    __repr__ = lambda self: "Transformer(%s%s)" % (self[0], (', %r' % (self[1],)) if self[1] is not None else '')

    # util: reduce arguments for pickle
    __getnewargs__ = lambda self: tuple(self)

    # util: map kind and target properties
    kind = property(operator.itemgetter(0), doc='Alias for `Transformer.kind` at index 0.')
    target = property(operator.itemgetter(1), doc='Alias for `Transformer.target` at index 1.')

