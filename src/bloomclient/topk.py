#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from .common import CheckValue
from .driver import CommandHandle
from .exception import IllegalArgumentException
from .serde import TopKProtocol


class TopKClient(CommandHandle):
    """
    TopKClient binds the Top-K commands to a connection. A Top-K structure
    keeps track of the k most frequent items it has seen.

    :param connection: the connection, or a :py:class:`ClientConfig`.
    :raises IllegalArgumentException: raises the exception if connection has
        no execute_command method.
    """
    OPERATIONS = {
        'reserve': TopKProtocol.RESERVE,
        'add': TopKProtocol.ADD,
        'increment_by': TopKProtocol.INCREMENT_BY,
        'query': TopKProtocol.QUERY,
        'count': TopKProtocol.COUNT,
        'list': TopKProtocol.LIST,
        'info': TopKProtocol.INFO}
    EXTENSION_PREFIX = 'topk_'

    def reserve(self, key, topk, width=None, depth=None, decay=None):
        """
        Creates an empty Top-K structure. The optional dimensions are
        positional on the wire, so a value can only be given together with
        the values before it.

        :param key: the name of the structure.
        :type key: str
        :param topk: the number of top items kept.
        :type topk: int
        :param width: the number of counters in each array, or None.
        :type width: int
        :param depth: the number of counter arrays, or None.
        :type depth: int
        :param decay: the probability of decaying a counter, or None.
        :type decay: float
        :returns: True if the server acknowledged the creation.
        :rtype: bool
        :raises IllegalArgumentException: raises the exception if a parameter
            has the wrong type, or if depth or decay is given without the
            values before it.
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(topk, 'topk')
        if width is not None:
            CheckValue.check_int(width, 'width')
        if depth is not None:
            CheckValue.check_int(depth, 'depth')
            if width is None:
                raise IllegalArgumentException(
                    'depth requires width to be set.')
        if decay is not None:
            CheckValue.check_float(decay, 'decay')
            if depth is None:
                raise IllegalArgumentException(
                    'decay requires width and depth to be set.')
        return self._execute(
            TopKProtocol.RESERVE, key=key, topk=topk, width=width,
            depth=depth, decay=decay)

    def add(self, key, items):
        """
        Adds items to the structure.

        :param key: the name of the structure.
        :type key: str
        :param items: the items to add.
        :type items: list
        :returns: for each item, the item it expelled from the top list, or
            None if nothing was expelled.
        :rtype: list(str)
        """
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        return self._execute(TopKProtocol.ADD, key=key, items=items)

    def increment_by(self, key, item, increment):
        """
        Increases the score of an item.

        :param key: the name of the structure.
        :type key: str
        :param item: the item.
        :param increment: the amount to add.
        :type increment: int
        :returns: the item expelled from the top list, or None.
        :rtype: str
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(increment, 'increment')
        return self._execute(
            TopKProtocol.INCREMENT_BY, key=key, item=item,
            increment=increment)

    def query(self, key, items):
        """
        Checks whether the items are in the top list.

        :rtype: list(bool)
        """
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        return self._execute(TopKProtocol.QUERY, key=key, items=items)

    def count(self, key, items):
        """
        Returns the estimated counts of the items.

        :rtype: list(int)
        """
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        return self._execute(TopKProtocol.COUNT, key=key, items=items)

    def list(self, key):
        """
        Returns the items in the top list.

        :param key: the name of the structure.
        :type key: str
        :returns: the items.
        :rtype: list(str)
        """
        CheckValue.check_key(key, 'key')
        return self._execute(TopKProtocol.LIST, key=key)

    def info(self, key):
        """
        Returns k, width, depth and decay of the structure.

        :rtype: TopKInfo
        """
        CheckValue.check_key(key, 'key')
        return self._execute(TopKProtocol.INFO, key=key)
