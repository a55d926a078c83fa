# -*- coding: utf-8 -*-

# meta
__doc__ = '''

    lazylayer: model API
    -------------------------------------------------
    |                                               |
    |   `lazylayer.model`                           |
    |                                               |
    |   declarative, lazily-resolved properties     |
    |   for models hydrated from partial data.      |
    |                                               |
    -------------------------------------------------

'''

# stdlib
import abc

# lazylayer util
from lazylayer.util import Transformer
from lazylayer.util import appconfig
from lazylayer.util import debug
from lazylayer.util.datastructures import _EMPTY

# lazylayer exceptions
from lazylayer.exceptions import MissingAttribute
from lazylayer.exceptions import RequiredAttribute
from lazylayer.exceptions import InvalidAttributeWrite


# Globals / Sentinels
_OPTION_ALIASES = {'from': 'source', 'with': 'transform'}  # declaration spellings accepted in option mappings
_OPTIONS = frozenset(('source', 'transform', 'required', 'default'))

logging = debug._root_logger.extend(path='model')


def _log(message, *args):

    ''' Log to the model channel at debug level, if enabled in config. '''

    logging._setcondition(appconfig.config('lazylayer.model')['logging']).debug(message, *args)


def _canonical(name):

    ''' Normalize a property or source key name to its canonical `str` form. '''

    if isinstance(name, bytes):
        return name.decode('utf-8')
    return str(name)


## == Property == ##

## Property
# Immutable property spec, doubling as the generated reader descriptor.
class Property(object):

    ''' Concrete Property class. '''

    __slots__ = ('name', 'source', 'transformer', 'required', 'default')

    ## = Internal Methods = ##
    def __init__(self, name=None, source=None, transform=None, required=False, default=_EMPTY):

        ''' Initialize this Property.

            :param name: Canonical property name, or ``None`` for an anonymous
            class-body declaration (named later by the metaclass).

            :param source: Source key or ordered iterable of source keys to
            search in raw attributes. Defaults to ``(name,)``.

            :param transform: ``None``, the name of a method to call on the
            found value, or a callable invoked as ``fn(value, instance)``.

            :param required: Raise ``RequiredAttribute`` instead of
            ``MissingAttribute`` when no value can be resolved.

            :param default: Value used when no source key is present. '''

        name = _canonical(name) if name is not None else None

        if source is None or source == ():
            source = (name,) if name is not None else ()
        elif isinstance(source, (str, bytes)):
            source = (_canonical(source),)
        else:
            source = tuple(_canonical(key) for key in source) or ((name,) if name is not None else ())

        transformer = Transformer.build(transform)
        if transform is not None and transformer.kind == Transformer.NONE:
            _log('ignoring unsupported transformer {!r} for property "{}"', transform, name)

        for attr, value in zip(self.__slots__, (name, source, transformer, bool(required), default)):
            object.__setattr__(self, attr, value)

    def __setattr__(self, name, value):

        ''' Properties are immutable once declared. '''

        raise AttributeError("Cannot mutate attribute \"%s\" of declared property \"%s\"." % (name, self.name))

    def __repr__(self):

        ''' Generate a string representation of this Property. '''

        flags = ''.join(((', required' if self.required else ''), (', default=%r' % (self.default,) if self.default is not _EMPTY else '')))
        return "Property(%s, source=%s%s)" % (self.name, list(self.source), flags)

    # util: whether a default was declared, `None` counts as "no default" until a reload has been tried
    has_default = property(lambda self: self.default is not _EMPTY and self.default is not None)

    ## = Descriptor Methods = ##
    def __get__(self, instance, owner):

        ''' Descriptor attribute access: reads resolve through the owning instance. '''

        if instance is None:
            return self  # class-level access yields the spec itself
        return instance.read_attribute(self.name)

    def __set__(self, instance, value):

        ''' Descriptor attribute write: generated readers are read-only. '''

        raise InvalidAttributeWrite(self.name, instance.kind())

    ## = Resolution Methods = ##
    def locate(self, data):

        ''' Find this property's raw value in ``data``: the first present source
            key wins regardless of its value, then a declared default, else `_EMPTY`. '''

        for key in self.source:
            if key in data:
                return data[key]
        return self.default if self.has_default else _EMPTY

    def transform(self, value, instance):

        ''' Apply this property's transformer to a located ``value``. '''

        return self.transformer(value, instance)

    # util method to clone `Property` objects, optionally under a new name
    def clone(self, name=None):

        ''' Copy this property, binding ``name`` (and its implicit source key) if given. '''

        name = self.name if name is None else name
        source = self.source if (self.source or self.name is not None) else None
        return self.__class__(name, source, self.transformer, self.required, self.default)

    @classmethod
    def from_options(cls, name, options):

        ''' Build a Property from a declaration's option mapping, ignoring unknown options. '''

        resolved = {}
        for option, value in options.items():
            option = _OPTION_ALIASES.get(option, option)
            if option not in _OPTIONS:
                _log('ignoring unknown option "{}" for property "{}"', option, name)
                continue
            resolved[option] = value
        return cls(name, **resolved)


## == Metaclasses == ##

## MetaModel
# Builds each model class's property registry from its class body.
class MetaModel(abc.ABCMeta):

    ''' Metaclass for data models. '''

    def __new__(cls, name, bases, properties):

        ''' Initialize a Model class. '''

        declared = {}  # model properties that start with '_' are ignored
        for prop, spec in list(properties.items()):
            if not prop.startswith('_') and isinstance(spec, Property):
                declared[prop] = properties[prop] = spec.clone(prop)

        properties['__declared__'] = declared
        return super(MetaModel, cls).__new__(cls, name, bases, properties)

    # util: generate string representation of `Model` class, like "Model(<prop1>, <prop n...>)".
    __repr__ = lambda cls: '%s(%s)' % (cls.__name__, ', '.join(cls.properties()))

    def _lookup(cls, name):

        ''' Resolve the effective Property for ``name``, walking the MRO, or ``None``. '''

        for klass in cls.__mro__:
            declared = klass.__dict__.get('__declared__')
            if declared and name in declared:
                return declared[name]
        return None


## == Concrete Classes == ##

## Model
# Concrete class for a lazily-resolved data model.
class Model(object, metaclass=MetaModel):

    ''' Concrete Model class. '''

    __slots__ = ('__data__', '__loaded__', '__weakref__')

    ## = Internal Methods = ##
    def __init__(self, attributes=None, **kwargs):

        ''' Initialize this Model with raw attributes, copied under canonical `str` keys.

            :raises RequiredAttribute: If a required property has neither a
            present source key nor a default in ``attributes``. '''

        self.__data__, self.__loaded__ = {}, False
        for name, value in dict(attributes or {}, **kwargs).items():
            self.__data__[_canonical(name)] = value

        for name, prop in self.__class__.properties().items():
            if prop.required and prop.locate(self.__data__) is _EMPTY:
                raise RequiredAttribute(name, self.kind())

    def __repr__(self):

        ''' Generate a string representation of this entity. '''

        return "%s(loaded=%s, %s)" % (self.kind(), self.__loaded__, ', '.join(str(k) for k in self.__data__))

    __str__ = __repr__

    # util: support for python's item API, proxied to reads and raw writes
    __getitem__ = lambda self, name: self.read_attribute(name)
    __setitem__ = lambda self, name, value: self.write_attribute(name, value)

    ## = Class Methods = ##
    kind = classmethod(lambda cls: cls.__name__)

    @classmethod
    def declare_property(cls, name, options=None, **kwargs):

        ''' Declare (or redeclare) a property on this model class.

            :param name: Property name, normalized to ``str``.
            :param options: Optional mapping of declaration options
            (``source``/``from``, ``transform``/``with``, ``required``,
            ``default``).
            :param kwargs: Declaration options as keywords.
            Unknown options are logged and ignored.
            :returns: The canonical property name. '''

        name = _canonical(name)
        prop = Property.from_options(name, dict(options or {}, **kwargs))

        # `__declared__` is per-class, so this never leaks into a parent's registry
        cls.__declared__[name] = prop
        setattr(cls, name, prop)

        _log('declared {!r} on model "{}"', prop, cls.kind())
        return name

    @classmethod
    def properties(cls):

        ''' Return every property visible on this class, inherited ones included. '''

        registry = {}
        for klass in reversed(cls.__mro__):
            registry.update(klass.__dict__.get('__declared__', {}))
        return registry

    ## = Resolver Methods = ##
    def reload(self):

        ''' Hook to fetch and merge missing raw attributes. No-op by default. '''

        return self

    fully_loaded = property(lambda self: self.__loaded__,
                            lambda self, flag: object.__setattr__(self, '__loaded__', bool(flag)),
                            doc='Whether further reloads could not provide more data.')

    def read_attribute(self, name):

        ''' Resolve and transform the value of a property.

            Source keys are searched in order, then the default is used. If
            neither yields a value and this model is not fully loaded,
            ``reload`` is called once and the search is retried. A ``None``
            default is only used after that retry.

            :param name: Property name. Undeclared names resolve from the raw
            attribute of the same name.
            :raises RequiredAttribute: If a required property has no value.
            :raises MissingAttribute: If any other property has no value.
            :returns: The transformed value. '''

        name = _canonical(name)
        prop = self.__class__._lookup(name) or Property(name)

        value = prop.locate(self.__data__)
        if value is _EMPTY and not self.__loaded__:
            _log('reloading model "{}" to resolve property "{}"', self.kind(), name)
            self.reload()
            value = prop.locate(self.__data__)

        if value is _EMPTY and prop.default is None and not prop.required:
            value = None  # a `None` default applies only once reloading could not help

        if value is _EMPTY:
            _log('could not resolve property "{}" of model "{}"', name, self.kind())
            if prop.required:
                raise RequiredAttribute(name, self.kind())
            raise MissingAttribute(name, self.kind())
        return prop.transform(value, self)

    def write_attribute(self, name, value):

        ''' Set a raw attribute, with no validation or transformation. '''

        self.__data__[_canonical(name)] = value
        return self

    def assign_attributes(self, attributes=None, **kwargs):

        ''' Write each raw attribute pair in order, via `write_attribute`. '''

        for name, value in dict(attributes or {}, **kwargs).items():
            self.write_attribute(name, value)
        return self

    def to_dict(self, strict=True, include=None, exclude=None):

        ''' Flatten this model's properties into a ``dict``.

            :param strict: Read every property, reloading and raising per the
            normal read rules. If ``False``, only properties that resolve from
            data already present (or a default) are included, and ``reload``
            is not called to resolve the rest.
            :param include: Optional iterable of names to limit output to.
            :param exclude: Optional iterable of names to leave out.
            :returns: ``dict`` of property names to transformed values. '''

        output = {}
        for name, prop in self.__class__.properties().items():
            if (include is not None and name not in include) or (exclude and name in exclude):
                continue
            if strict:
                output[name] = self.read_attribute(name)
                continue

            value = prop.locate(self.__data__)
            if value is _EMPTY and prop.default is None and not prop.required:
                value = None
            if value is not _EMPTY:
                output[name] = prop.transform(value, self)
        return output


# Module Globals
__all__ = ['Property', 'MetaModel', 'Model']
