# -*- coding: utf-8 -*-

'''

    lazylayer exceptions

    holds core exceptions for the :py:mod:`lazylayer` API. property
    resolution failures (``RequiredAttribute`` and ``MissingAttribute``)
    are the only errors raised while reading; anything raised by a
    transformer or by ``reload`` propagates untouched.

'''


class Error(Exception): pass


class ModelException(Error):

    message = "%s"

    def __init__(self, *context):

        ''' Format this exception's message template with ``context``. '''

        self.context = context
        self.message = self.message % context
        super(ModelException, self).__init__(self.message)

    def __repr__(self):

        return self.message

    __str__ = __repr__


## == Resolution Errors == ##

class AttributeException(ModelException, AttributeError):

    def __init__(self, name, kind):

        ''' Keep the offending property name around for callers. '''

        super(AttributeException, self).__init__(name, kind)
        self.name, self.kind = name, kind  # set after `AttributeError.__init__`, which resets `name`


class RequiredAttribute(AttributeException):
    message = "Property \"%s\" of model \"%s\" is marked as `required`, but no value could be resolved."


class MissingAttribute(AttributeException):
    message = "Property \"%s\" of model \"%s\" has no value and no default."


class InvalidAttributeWrite(AttributeException):
    message = "Cannot assign to property \"%s\" of model \"%s\" directly, use `write_attribute`."

