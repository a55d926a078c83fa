# -*- coding: utf-8 -*-

'''

Util: Config

Holds utilities for dealing with lazylayer config, and the default config set.

'''

# Base Imports
import copy

# Constants
_DEFAULT_CONFIG = {

    'lazylayer.model': {
        'logging': True  # log reload triggers, failed reads and declarations on the model channel
    }

}

_OVERRIDES = {}


def config(section):

    ''' Resolve a config section, merged with any registered overrides.

        :param section: Dotted section name, like ``lazylayer.model``.
        :raises KeyError: If the section is unknown.
        :returns: A copy of the section ``dict``. '''

    resolved = copy.deepcopy(_DEFAULT_CONFIG[section])
    resolved.update(_OVERRIDES.get(section, {}))
    return resolved


def override(section, **values):

    ''' Register config overrides for a section. Pass no values to clear them. '''

    if section not in _DEFAULT_CONFIG:
        raise KeyError("Unknown config section \"%s\"." % section)

    if not values:
        _OVERRIDES.pop(section, None)
        return config(section)

    _OVERRIDES.setdefault(section, {}).update(values)
    return config(section)
