# -*- coding: utf-8 -*-

'''

    lazylayer model tests: `lazylayer.model`

    testsuite for exercising property declaration, the
    property registry and the lazy attribute resolver.

'''
