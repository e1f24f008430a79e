#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

"""
Free functions taking the connection as their first argument, for code that
prefers not to keep a client object around::

    import redis
    from bloomclient.extensions import bf_add, bf_exists

    r = redis.Redis()
    bf_add(r, 'newFilter', 'foo')
    bf_exists(r, 'newFilter', 'foo')

Each function is named after the family prefix and a client method, such as
bf_reserve for :py:meth:`BloomFilterClient.reserve`, takes the same
parameters after the connection and returns the same result. The functions
are generated from the operation table of each client class.
"""

from functools import wraps

from .bloom import BloomFilterClient
from .countmin import CountMinSketchClient
from .cuckoo import CuckooFilterClient
from .topk import TopKClient

HANDLE_CLASSES = (BloomFilterClient, CuckooFilterClient, CountMinSketchClient,
                  TopKClient)

__all__ = []


def make_extension(handle_class, method_name):
    """
    Returns the free function delegating to method_name of handle_class. The
    connection may also be a :py:class:`ClientConfig`.

    :param handle_class: the client class.
    :param method_name: the name of a method listed in the OPERATIONS table of
        handle_class.
    :type method_name: str
    :returns: the function.
    """
    method = getattr(handle_class, method_name)

    @wraps(method, assigned=('__doc__',), updated=())
    def extension(connection, *args, **kwargs):
        return getattr(handle_class(connection), method_name)(*args, **kwargs)

    extension.__name__ = handle_class.EXTENSION_PREFIX + method_name
    extension.__qualname__ = extension.__name__
    extension.__module__ = __name__
    return extension


for _handle_class in HANDLE_CLASSES:
    for _method_name in sorted(_handle_class.OPERATIONS):
        _extension = make_extension(_handle_class, _method_name)
        globals()[_extension.__name__] = _extension
        __all__.append(_extension.__name__)

del _handle_class, _method_name, _extension
