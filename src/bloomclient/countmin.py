#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from collections.abc import Mapping

from .common import CheckValue
from .driver import CommandHandle
from .serde import CountMinSketchProtocol


class CountMinSketchClient(CommandHandle):
    """
    CountMinSketchClient binds the Count-Min Sketch commands to a connection.
    A sketch estimates the frequency of items; the estimates may be too high
    but are never too low.

    :param connection: the connection, or a :py:class:`ClientConfig`.
    :raises IllegalArgumentException: raises the exception if connection has
        no execute_command method.
    """
    OPERATIONS = {
        'init_by_dim': CountMinSketchProtocol.INIT_BY_DIM,
        'init_by_prob': CountMinSketchProtocol.INIT_BY_PROB,
        'incr_by': CountMinSketchProtocol.INCR_BY,
        'incr_by_multiple': CountMinSketchProtocol.INCR_BY_MULTIPLE,
        'query': CountMinSketchProtocol.QUERY,
        'merge': CountMinSketchProtocol.MERGE,
        'info': CountMinSketchProtocol.INFO}
    EXTENSION_PREFIX = 'cms_'

    def init_by_dim(self, key, width, depth):
        """
        Creates a sketch with the given dimensions.

        :param key: the name of the sketch.
        :type key: str
        :param width: the number of counters in each array.
        :type width: int
        :param depth: the number of counter arrays.
        :type depth: int
        :returns: True if the server acknowledged the creation.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(width, 'width')
        CheckValue.check_int(depth, 'depth')
        return self._execute(
            CountMinSketchProtocol.INIT_BY_DIM, key=key, width=width,
            depth=depth)

    def init_by_prob(self, key, error, probability):
        """
        Creates a sketch sized for the given error bounds.

        :param key: the name of the sketch.
        :type key: str
        :param error: the estimate overshoot as a fraction of the total count.
        :type error: float
        :param probability: the desired probability of an inflated count.
        :type probability: float
        :returns: True if the server acknowledged the creation.
        :rtype: bool
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_float(error, 'error')
        CheckValue.check_float(probability, 'probability')
        return self._execute(
            CountMinSketchProtocol.INIT_BY_PROB, key=key, error=error,
            probability=probability)

    def incr_by(self, key, item, increment):
        """
        Increases the count of an item.

        :param key: the name of the sketch.
        :type key: str
        :param item: the item.
        :param increment: the amount to add.
        :type increment: int
        :returns: the estimated count of the item after the increment.
        :rtype: int
        """
        CheckValue.check_key(key, 'key')
        CheckValue.check_int(increment, 'increment')
        return self._execute(
            CountMinSketchProtocol.INCR_BY, key=key, item=item,
            increment=increment)

    def incr_by_multiple(self, key, increments):
        """
        Increases the counts of several items in one command.

        :param key: the name of the sketch.
        :type key: str
        :param increments: the amount to add per item, as a dict or as a
            list of (item, increment) pairs.
        :returns: the estimated counts after the increments, in the order of
            increments.
        :rtype: list(int)
        """
        CheckValue.check_key(key, 'key')
        if not isinstance(increments, Mapping):
            CheckValue.check_items(increments, 'increments')
        return self._execute(
            CountMinSketchProtocol.INCR_BY_MULTIPLE, key=key,
            increments=increments)

    def query(self, key, items):
        """
        Returns the estimated counts of the items.

        :rtype: list(int)
        """
        CheckValue.check_key(key, 'key')
        self._check_items(items)
        return self._execute(CountMinSketchProtocol.QUERY, key=key,
                             items=items)

    def merge(self, dest, sources):
        """
        Merges several sketches into dest, which must already exist and have
        the same dimensions as the sources. With a dict of source to weight
        the count of each source is multiplied by its weight.

        :param dest: the name of the destination sketch.
        :type dest: str
        :param sources: the names of the source sketches, or a dict of name
            to weight.
        :returns: True if the server acknowledged the merge.
        :rtype: bool
        """
        CheckValue.check_key(dest, 'dest')
        if not isinstance(sources, Mapping):
            CheckValue.check_items(sources, 'sources')
        return self._execute(
            CountMinSketchProtocol.MERGE, dest=dest, sources=sources)

    def info(self, key):
        """
        Returns the width, depth and total count of the sketch.

        :rtype: CountMinSketchInfo
        """
        CheckValue.check_key(key, 'key')
        return self._execute(CountMinSketchProtocol.INFO, key=key)
