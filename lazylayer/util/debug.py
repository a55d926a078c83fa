# -*- coding: utf-8 -*-

'''

Util: Debug

Holds the logbook-backed logging channels used across lazylayer.

'''

# Base Imports
import logbook

# Exceptions
from lazylayer.exceptions import Error

_loggers = {}
_root_logger = None


## LoggingException
# Thrown if there's a config issue with a logging channel.
class LoggingException(Error):
    pass


def _channel_key(path, name):

    ''' Build the cache key for a logging channel. '''

    if not path or not isinstance(path, str):
        raise LoggingException("Invalid logging channel path: \"%s\"." % path)
    return (path, name) if name else (path,)


## LazyLayerLogger
# Represents a logging channel for a single module.
class LazyLayerLogger(logbook.Logger):

    ''' Logging controller for outputting debug information from different levels of lazylayer. '''

    # Logging channel config
    channel_path = 'lazylayer'
    channel_name = ''
    channel_parent = None

    def __new__(cls, path='lazylayer', name='', parent_channel=None):

        ''' Create a new logger channel, or return it if it already exists. '''

        cached = _loggers.get(_channel_key(path, name))
        if cached is not None:
            return cached
        return super(LazyLayerLogger, cls).__new__(cls)

    def __init__(self, path='lazylayer', name='', parent_channel=None):

        ''' Init a new logger channel. '''

        key = _channel_key(path, name)
        if _loggers.get(key) is self:
            return  # already initialized, `__new__` handed back the cached channel

        super(LazyLayerLogger, self).__init__(':'.join(key))

        ## splice in root as parent if unspecified, `False` means explicitly parent-less
        if parent_channel is None:
            parent_channel = _root_logger
        elif parent_channel is False:
            parent_channel = None

        self.channel_path, self.channel_name, self.channel_parent = path, name, parent_channel
        _loggers[key] = self

    def extend(self, path=None, name=None):

        ''' Extend an existing channel into a new one. '''

        if path is None and name is None:
            raise LoggingException('Cannot extend logging channel without appending a name or a path.')

        if path is not None:
            path = '.'.join([self.channel_path, path])
        return self.__class__(path=path or self.channel_path, name=name or '', parent_channel=self)

    def _setcondition(self, conditional):

        ''' Set a local flag to enable/disable logging through this channel. '''

        self.disabled = (not conditional)
        return self


## create root logger
_root_logger = LazyLayerLogger(path='lazylayer', name='', parent_channel=False)
