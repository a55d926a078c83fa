# -*- coding: utf-8 -*-

'''

    lazylayer

    a lazy, declarative attribute layer for models hydrated from partial
    data. declare properties on a :py:class:`lazylayer.model.Model`, hand
    it whatever raw attributes you have, and override ``reload`` to fetch
    the rest on demand.

'''

__version__ = '0.1.0'

## lazylayer model API
from lazylayer.model import Model
from lazylayer.model import Property
from lazylayer.model import MetaModel

## lazylayer exceptions
from lazylayer.exceptions import Error
from lazylayer.exceptions import MissingAttribute
from lazylayer.exceptions import RequiredAttribute

## lazylayer util
from lazylayer.util import Transformer


__all__ = ['Model', 'Property', 'MetaModel', 'Error', 'MissingAttribute', 'RequiredAttribute', 'Transformer']
