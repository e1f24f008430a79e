#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from .common import CheckValue
from .driver import CommandHandle
from .exception import IllegalArgumentException
from .operations import CuckooInsertOptions
from .serde import CuckooFilterProtocol


class CuckooFilterClient(CommandHandle):
    """
    CuckooFilterClient binds the Cuckoo filter commands to a connection.
    Unlike a Bloom filter, a Cuckoo filter supports deleting items and
    counting how many times an item may have been added.

    :param connection: the connection, or a :py:class:`ClientConfig`.
    :raises IllegalArgumentException: raises the exception if connection has
        no execute_command method.
    """
    OPERATIONS = {
        'reserve': CuckooFilterProtocol.RESERVE,
        'add': CuckooFilterProtocol.ADD,
        'add_advanced': CuckooFilterProtocol.ADD_ADVANCED,
        'insert': CuckooFilterProtocol.INSERT,
        'insert_advanced': CuckooFilterProtocol.INSERT_ADVANCED,
        'exists': CuckooFilterProtocol.EXISTS,
        'delete': CuckooFilterProtocol.DELETE,
        'count': CuckooFilterProtocol.COUNT,
        'scan_dump': CuckooFilterProtocol.SCAN_DUMP,
        'load_chunk': CuckooFilterProtocol.LOAD_CHUNK,
        'info': CuckooFilterProtocol.INFO}
    EXTENSION_PREFIX = 'cf_'

    def reserve(self, key, capacity, bucket_size=None, max_iterations=None,
                expansion=None):
        """
        Creates an empty filter.

        :param key: the name of the filter.
        :type key: str
        :param capacity: the estimated number of items.
        :type capacity: int
        :param bucket_size: the number of items in each bucket, or None for
            the server default.
        :type bucket_size: int
        :param max_iterations: the number of attempts to swap items between
            buckets before declaring the filter full, or None.
        :type max_iterations: int
        :param expansion: the growth factor of the sub-filters, or None.
        :type expansion: int
        :returns: True if the server acknowledged the creation.
        :rtype: bool
        :raises IllegalArgumentException: raises the exception if a parameter
            has the wrong type.
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(capacity, 'capacity')
        for name, value in (('bucket_size', bucket_size),
                            ('max_iterations', max_iterations),
                            ('expansion', expansion)):
            if value is not None:
                CheckValue.check_int(value, name)
        return self._execute(
            CuckooFilterProtocol.RESERVE, key=key, capacity=capacity,
            bucket_size=bucket_size, max_iterations=max_iterations,
            expansion=expansion)

    def add(self, key, item):
        """
        Adds an item, creating the filter if needed. The same item can be
        added more than once.

        :param key: the name of the filter.
        :type key: str
        :param item: the item to add.
        :returns: True on success.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        return self._execute(CuckooFilterProtocol.ADD, key=key, item=item)

    def add_advanced(self, key, item):
        """
        Adds an item only if it does not exist yet (CF.ADDNX).

        :param key: the name of the filter.
        :type key: str
        :param item: the item to add.
        :returns: True if the item was added, False if it may exist already.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        return self._execute(
            CuckooFilterProtocol.ADD_ADVANCED, key=key, item=item)

    def insert(self, key, items, options=None):
        """
        Adds one or more items, creating the filter with the settings of
        options if it does not exist.

        :param key: the name of the filter.
        :type key: str
        :param items: the items to add.
        :type items: list
        :param options: the optional settings, or None.
        :type options: CuckooInsertOptions
        :returns: one flag per item, in the order of items.
        :rtype: list(bool)
        :raises IllegalArgumentException: raises the exception if options is
            not an instance of :py:class:`CuckooInsertOptions`.
        """
        return self._insert(CuckooFilterProtocol.INSERT, key, items, options)

    def insert_advanced(self, key, items, options=None):
        """
        Adds the items that do not exist yet (CF.INSERTNX). Same parameters
        as :py:meth:`insert`.

        :returns: one flag per item, True where the item was added.
        :rtype: list(bool)
        """
        return self._insert(
            CuckooFilterProtocol.INSERT_ADVANCED, key, items, options)

    def exists(self, key, item):
        """
        Checks whether an item may exist in the filter.

        :returns: False if the item certainly does not exist, True if it may.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        return self._execute(CuckooFilterProtocol.EXISTS, key=key, item=item)

    def delete(self, key, item):
        """
        Deletes one occurrence of an item from the filter.

        :param key: the name of the filter.
        :type key: str
        :param item: the item to delete.
        :returns: True if an occurrence was deleted, False if none was found.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        return self._execute(CuckooFilterProtocol.DELETE, key=key, item=item)

    def count(self, key, item):
        """
        Returns the number of times an item may have been added. The count is
        an upper bound.

        :rtype: int
        """
        CheckValue.check_key(key, 'key')
        return self._execute(CuckooFilterProtocol.COUNT, key=key, item=item)

    def scan_dump(self, key, iterator):
        """
        Begins, or continues, an incremental dump of the filter. See
        :py:meth:`BloomFilterClient.scan_dump` for the loop.

        :param key: the name of the filter.
        :type key: str
        :param iterator: 0 for the first call, then the returned iterator.
        :type iterator: int
        :returns: the next iterator and the chunk.
        :rtype: ScanDumpResult
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(iterator, 'iterator')
        return self._execute(
            CuckooFilterProtocol.SCAN_DUMP, key=key, iterator=iterator)

    def load_chunk(self, key, iterator, data):
        """
        Restores a chunk produced by :py:meth:`scan_dump`.

        :returns: True if the server acknowledged the chunk.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(iterator, 'iterator')
        CheckValue.check_bytes(data, 'data')
        return self._execute(
            CuckooFilterProtocol.LOAD_CHUNK, key=key, iterator=iterator,
            data=data)

    def info(self, key):
        """
        Returns information about the filter.

        :param key: the name of the filter.
        :type key: str
        :returns: the information.
        :rtype: CuckooFilterInfo
        """
        CheckValue.check_key(key, 'key')
        return self._execute(CuckooFilterProtocol.INFO, key=key)

    def _insert(self, serializer, key, items, options):
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        params = dict()
        if options is not None:
            if not isinstance(options, CuckooInsertOptions):
                raise IllegalArgumentException(
                    'options must be an instance of CuckooInsertOptions.')
            params.update(options.get_parameters())
        return self._execute(serializer, key=key, items=items, **params)
