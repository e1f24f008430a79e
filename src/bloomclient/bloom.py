#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from .common import CheckValue
from .driver import CommandHandle
from .exception import IllegalArgumentException
from .operations import BloomInsertOptions
from .serde import BloomFilterProtocol


class BloomFilterClient(CommandHandle):
    """
    BloomFilterClient binds the Bloom filter commands to a connection. A Bloom
    filter answers membership queries with no false negatives and a bounded
    rate of false positives; items cannot be removed.

    A filter is created explicitly with :py:meth:`reserve`, or implicitly by
    the first :py:meth:`add`, :py:meth:`add_multiple` or :py:meth:`insert`
    on a missing key, in which case the server defaults apply.

    Example::

        import redis
        from bloomclient import BloomFilterClient

        bloom = BloomFilterClient(redis.Redis())
        bloom.reserve('newFilter', 100, 0.001)
        bloom.add('newFilter', 'val1')
        assert bloom.exists('newFilter', 'val1')

    :param connection: the connection, or a :py:class:`ClientConfig`.
    :raises IllegalArgumentException: raises the exception if connection has
        no execute_command method.
    """
    OPERATIONS = {
        'reserve': BloomFilterProtocol.RESERVE,
        'add': BloomFilterProtocol.ADD,
        'add_multiple': BloomFilterProtocol.ADD_MULTIPLE,
        'exists': BloomFilterProtocol.EXISTS,
        'exists_multiple': BloomFilterProtocol.EXISTS_MULTIPLE,
        'insert': BloomFilterProtocol.INSERT,
        'info': BloomFilterProtocol.INFO,
        'scan_dump': BloomFilterProtocol.SCAN_DUMP,
        'load_chunk': BloomFilterProtocol.LOAD_CHUNK}
    EXTENSION_PREFIX = 'bf_'

    def reserve(self, key, capacity, error_rate, expansion=None,
                non_scaling=None):
        """
        Creates an empty filter. The values are not range checked here, the
        server rejects a zero capacity, an error rate outside (0, 1) or a key
        that already exists.

        :param key: the name of the filter.
        :type key: str
        :param capacity: the number of items the filter is sized for.
        :type capacity: int
        :param error_rate: the desired probability of false positives.
        :type error_rate: float
        :param expansion: the growth factor of the sub-filters created when
            the capacity is reached, or None for the server default.
        :type expansion: int
        :param non_scaling: True to fail instead of adding a sub-filter when
            the filter is full.
        :type non_scaling: bool
        :returns: True if the server acknowledged the creation.
        :rtype: bool
        :raises IllegalArgumentException: raises the exception if a parameter
            has the wrong type.
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(capacity, 'capacity')
        CheckValue.check_float(error_rate, 'error_rate')
        if expansion is not None:
            CheckValue.check_int(expansion, 'expansion')
        if non_scaling is not None:
            CheckValue.check_boolean(non_scaling, 'non_scaling')
        return self._execute(
            BloomFilterProtocol.RESERVE, key=key, capacity=capacity,
            error_rate=error_rate, expansion=expansion,
            non_scaling=non_scaling)

    def add(self, key, item):
        """
        Adds an item to the filter, creating the filter if needed.

        :param key: the name of the filter.
        :type key: str
        :param item: the item to add.
        :returns: True if the item was newly added, False if it may have
            existed already.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        return self._execute(BloomFilterProtocol.ADD, key=key, item=item)

    def add_multiple(self, key, items):
        """
        Adds one or more items to the filter, creating the filter if needed.

        :param key: the name of the filter.
        :type key: str
        :param items: the items to add.
        :type items: list
        :returns: one flag per item, in the order of items, True where the
            item was newly added.
        :rtype: list(bool)
        """
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        return self._execute(
            BloomFilterProtocol.ADD_MULTIPLE, key=key, items=items)

    def exists(self, key, item):
        """
        Checks whether an item may exist in the filter.

        :param key: the name of the filter.
        :type key: str
        :param item: the item to check.
        :returns: False if the item certainly does not exist, True if it may.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        return self._execute(BloomFilterProtocol.EXISTS, key=key, item=item)

    def exists_multiple(self, key, items):
        """
        Checks whether each of the items may exist in the filter.

        :param key: the name of the filter.
        :type key: str
        :param items: the items to check.
        :type items: list
        :returns: one flag per item, in the order of items.
        :rtype: list(bool)
        """
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        return self._execute(
            BloomFilterProtocol.EXISTS_MULTIPLE, key=key, items=items)

    def insert(self, key, items, options=None):
        """
        Adds one or more items to the filter. If the filter does not exist it
        is created with the settings of options, unless
        :py:meth:`BloomInsertOptions.set_no_create` is True, in which case the
        server reports an error. The server also rejects NOCREATE together
        with a capacity or an error rate.

        :param key: the name of the filter.
        :type key: str
        :param items: the items to add.
        :type items: list
        :param options: the optional settings, or None.
        :type options: BloomInsertOptions
        :returns: one flag per item, in the order of items, True where the
            item was newly added.
        :rtype: list(bool)
        :raises IllegalArgumentException: raises the exception if options is
            not an instance of :py:class:`BloomInsertOptions`.
        """
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        params = dict()
        if options is not None:
            if not isinstance(options, BloomInsertOptions):
                raise IllegalArgumentException(
                    'options must be an instance of BloomInsertOptions.')
            params.update(options.get_parameters())
        return self._execute(
            BloomFilterProtocol.INSERT, key=key, items=items, **params)

    def info(self, key):
        """
        Returns information about the filter.

        :param key: the name of the filter.
        :type key: str
        :returns: the information.
        :rtype: BloomFilterInfo
        """
        CheckValue.check_key(key, 'key')
        return self._execute(BloomFilterProtocol.INFO, key=key)

    def scan_dump(self, key, iterator):
        """
        Begins, or continues, an incremental dump of the filter. Start with
        iterator 0 and call again with the returned iterator until it is 0.
        Each chunk with a non-zero iterator must be passed to
        :py:meth:`load_chunk` unchanged and in order::

            it = 0
            while True:
                it, data = bloom.scan_dump('src', it)
                if it == 0:
                    break
                bloom.load_chunk('dst', it, data)

        The payload is binary, use a connection without decode_responses.

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
            BloomFilterProtocol.SCAN_DUMP, key=key, iterator=iterator)

    def load_chunk(self, key, iterator, data):
        """
        Restores a chunk produced by :py:meth:`scan_dump`.

        :param key: the name of the filter to restore.
        :type key: str
        :param iterator: the iterator returned with the chunk.
        :type iterator: int
        :param data: the chunk.
        :type data: bytes
        :returns: True if the server acknowledged the chunk.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(iterator, 'iterator')
        CheckValue.check_bytes(data, 'data')
        return self._execute(
            BloomFilterProtocol.LOAD_CHUNK, key=key, iterator=iterator,
            data=data)
