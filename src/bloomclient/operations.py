#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from collections import namedtuple

from .common import CheckValue


class InsertOptions(object):
    """
    A base class for the optional settings of the insert commands. Only the
    settings that have been set are sent to the server; a setting that has
    been set to 0 or False is still considered set, the builder decides what
    it emits for it.
    """

    def __init__(self):
        self._capacity = None
        self._no_create = None

    def __eq__(self, other):
        return (type(self) is type(other) and
                self.get_parameters() == other.get_parameters())

    def __ne__(self, other):
        return not self.__eq__(other)

    def __str__(self):
        return (self.__class__.__name__ + '(' + ', '.join(
            k + '=' + str(v) for k, v in self.get_parameters().items()) + ')')

    def get_capacity(self):
        """
        Returns the capacity of the filter created by the insert, if any.

        :returns: the capacity, or None if not set.
        :rtype: int
        """
        return self._capacity

    def get_no_create(self):
        """
        Returns whether the insert must fail instead of creating the filter.

        :returns: the flag, or None if not set.
        :rtype: bool
        """
        return self._no_create

    def get_parameters(self):
        """
        Internal use only.

        Returns the settings that have been set, keyed by the parameter names
        the argument builder uses.

        :returns: the settings.
        :rtype: dict
        """
        params = dict()
        for name, value in self._parameters():
            if value is not None:
                params[name] = value
        return params

    def set_capacity(self, capacity):
        """
        Sets the desired capacity of the filter, used only if the insert
        creates it.

        :param capacity: the capacity.
        :type capacity: int
        :returns: self.
        :raises IllegalArgumentException: raises the exception if capacity is
            not an integer.
        """
        CheckValue.check_int(capacity, 'capacity')
        self._capacity = capacity
        return self

    def set_no_create(self, no_create):
        """
        Sets whether the insert must fail if the filter does not exist yet.
        The server rejects this flag combined with a capacity or an error
        rate.

        :param no_create: True to prevent the creation of the filter.
        :type no_create: bool
        :returns: self.
        :raises IllegalArgumentException: raises the exception if no_create
            is not a boolean.
        """
        CheckValue.check_boolean(no_create, 'no_create')
        self._no_create = no_create
        return self

    def _parameters(self):
        return [('capacity', self._capacity), ('no_create', self._no_create)]


class BloomInsertOptions(InsertOptions):
    """
    Optional settings for :py:meth:`BloomFilterClient.insert`.
    """

    def __init__(self):
        super(BloomInsertOptions, self).__init__()
        self._error_rate = None
        self._expansion = None
        self._non_scaling = None

    def get_error_rate(self):
        """
        Returns the error rate of the filter created by the insert, if any.

        :returns: the error rate, or None if not set.
        :rtype: float
        """
        return self._error_rate

    def get_expansion(self):
        """
        Returns the expansion factor of the filter created by the insert, if
        any.

        :returns: the expansion factor, or None if not set.
        :rtype: int
        """
        return self._expansion

    def get_non_scaling(self):
        """
        Returns whether the filter created by the insert is non-scaling.

        :returns: the flag, or None if not set.
        :rtype: bool
        """
        return self._non_scaling

    def set_error_rate(self, error_rate):
        """
        Sets the desired probability for false positives of the filter, used
        only if the insert creates it.

        :param error_rate: the error rate.
        :type error_rate: float
        :returns: self.
        :raises IllegalArgumentException: raises the exception if error_rate
            is not a number.
        """
        CheckValue.check_float(error_rate, 'error_rate')
        self._error_rate = error_rate
        return self

    def set_expansion(self, expansion):
        """
        Sets the expansion factor. When the capacity is reached an additional
        sub-filter is created whose size is the size of the last sub-filter
        multiplied by expansion.

        :param expansion: the expansion factor.
        :type expansion: int
        :returns: self.
        :raises IllegalArgumentException: raises the exception if expansion
            is not an integer.
        """
        CheckValue.check_int(expansion, 'expansion')
        self._expansion = expansion
        return self

    def set_non_scaling(self, non_scaling):
        """
        Sets whether the filter is prevented from creating additional
        sub-filters once its initial capacity is reached.

        :param non_scaling: True for a non-scaling filter.
        :type non_scaling: bool
        :returns: self.
        :raises IllegalArgumentException: raises the exception if non_scaling
            is not a boolean.
        """
        CheckValue.check_boolean(non_scaling, 'non_scaling')
        self._non_scaling = non_scaling
        return self

    def _parameters(self):
        return [('capacity', self._capacity),
                ('error_rate', self._error_rate),
                ('expansion', self._expansion),
                ('no_create', self._no_create),
                ('non_scaling', self._non_scaling)]


class CuckooInsertOptions(InsertOptions):
    """
    Optional settings for :py:meth:`CuckooFilterClient.insert` and
    :py:meth:`CuckooFilterClient.insert_advanced`.
    """


class InfoResult(object):
    """
    A base class for the records decoded from the INFO commands. Every field
    starts at its zero value and keeps it unless the server reports the
    matching label.
    """
    _FIELDS = ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        for field in self._FIELDS:
            if getattr(self, '_' + field) != getattr(other, '_' + field):
                return False
        return True

    def __ne__(self, other):
        return not self.__eq__(other)

    def __str__(self):
        return (self.__class__.__name__ + '(' + ', '.join(
            field + '=' + str(getattr(self, '_' + field))
            for field in self._FIELDS) + ')')

    __repr__ = __str__


class BloomFilterInfo(InfoResult):
    """
    Describes a Bloom filter, as returned by
    :py:meth:`BloomFilterClient.info`.
    """
    _FIELDS = ('capacity', 'size', 'number_of_filters',
               'number_of_items_inserted', 'expansion_rate')

    def __init__(self):
        self._capacity = 0
        self._size = 0
        self._number_of_filters = 0
        self._number_of_items_inserted = 0
        self._expansion_rate = None

    def get_capacity(self):
        """
        Returns the capacity of the filter.

        :returns: the capacity.
        :rtype: int
        """
        return self._capacity

    def get_expansion_rate(self):
        """
        Returns the expansion rate of the filter. Non-scaling filters have
        none.

        :returns: the expansion rate, or None if the server did not report
            one.
        :rtype: int
        """
        return self._expansion_rate

    def get_number_of_filters(self):
        """
        Returns the number of sub-filters.

        :returns: the number of sub-filters.
        :rtype: int
        """
        return self._number_of_filters

    def get_number_of_items_inserted(self):
        """
        Returns the number of items added to the filter.

        :returns: the number of items inserted.
        :rtype: int
        """
        return self._number_of_items_inserted

    def get_size(self):
        """
        Returns the memory size of the filter, in bytes.

        :returns: the size.
        :rtype: int
        """
        return self._size

    def set_capacity(self, capacity):
        self._capacity = capacity
        return self

    def set_expansion_rate(self, expansion_rate):
        self._expansion_rate = expansion_rate
        return self

    def set_number_of_filters(self, number_of_filters):
        self._number_of_filters = number_of_filters
        return self

    def set_number_of_items_inserted(self, number_of_items_inserted):
        self._number_of_items_inserted = number_of_items_inserted
        return self

    def set_size(self, size):
        self._size = size
        return self


class CuckooFilterInfo(InfoResult):
    """
    Describes a Cuckoo filter, as returned by
    :py:meth:`CuckooFilterClient.info`.
    """
    _FIELDS = ('size', 'number_of_buckets', 'number_of_filters',
               'number_of_items_inserted', 'number_of_items_deleted',
               'bucket_size', 'expansion_rate', 'max_iterations')

    def __init__(self):
        self._size = 0
        self._number_of_buckets = 0
        self._number_of_filters = 0
        self._number_of_items_inserted = 0
        self._number_of_items_deleted = 0
        self._bucket_size = 0
        self._expansion_rate = 0
        self._max_iterations = 0

    def get_bucket_size(self):
        """
        Returns the number of items in each bucket.

        :returns: the bucket size.
        :rtype: int
        """
        return self._bucket_size

    def get_expansion_rate(self):
        """
        Returns the expansion rate of the filter.

        :returns: the expansion rate.
        :rtype: int
        """
        return self._expansion_rate

    def get_max_iterations(self):
        """
        Returns the number of attempts to swap items between buckets before
        the filter is declared full and an additional one is created.

        :returns: the maximum number of iterations.
        :rtype: int
        """
        return self._max_iterations

    def get_number_of_buckets(self):
        """
        Returns the number of buckets.

        :returns: the number of buckets.
        :rtype: int
        """
        return self._number_of_buckets

    def get_number_of_filters(self):
        """
        Returns the number of sub-filters.

        :returns: the number of sub-filters.
        :rtype: int
        """
        return self._number_of_filters

    def get_number_of_items_deleted(self):
        """
        Returns the number of items deleted from the filter.

        :returns: the number of items deleted.
        :rtype: int
        """
        return self._number_of_items_deleted

    def get_number_of_items_inserted(self):
        """
        Returns the number of items added to the filter.

        :returns: the number of items inserted.
        :rtype: int
        """
        return self._number_of_items_inserted

    def get_size(self):
        """
        Returns the memory size of the filter, in bytes.

        :returns: the size.
        :rtype: int
        """
        return self._size

    def set_bucket_size(self, bucket_size):
        self._bucket_size = bucket_size
        return self

    def set_expansion_rate(self, expansion_rate):
        self._expansion_rate = expansion_rate
        return self

    def set_max_iterations(self, max_iterations):
        self._max_iterations = max_iterations
        return self

    def set_number_of_buckets(self, number_of_buckets):
        self._number_of_buckets = number_of_buckets
        return self

    def set_number_of_filters(self, number_of_filters):
        self._number_of_filters = number_of_filters
        return self

    def set_number_of_items_deleted(self, number_of_items_deleted):
        self._number_of_items_deleted = number_of_items_deleted
        return self

    def set_number_of_items_inserted(self, number_of_items_inserted):
        self._number_of_items_inserted = number_of_items_inserted
        return self

    def set_size(self, size):
        self._size = size
        return self


class CountMinSketchInfo(InfoResult):
    """
    Describes a Count-Min Sketch: its width, its depth and the total count
    of all increments.
    """
    _FIELDS = ('width', 'depth', 'count')

    def __init__(self):
        self._width = 0
        self._depth = 0
        self._count = 0

    def get_count(self):
        return self._count

    def get_depth(self):
        return self._depth

    def get_width(self):
        return self._width

    def set_count(self, count):
        self._count = count
        return self

    def set_depth(self, depth):
        self._depth = depth
        return self

    def set_width(self, width):
        self._width = width
        return self


class TopKInfo(InfoResult):
    """
    Describes a Top-K sketch: the number of items kept (k), the width and
    depth of its counter arrays and its decay probability.
    """
    _FIELDS = ('k', 'width', 'depth', 'decay')

    def __init__(self):
        self._k = 0
        self._width = 0
        self._depth = 0
        self._decay = 0.0

    def get_decay(self):
        return self._decay

    def get_depth(self):
        return self._depth

    def get_k(self):
        return self._k

    def get_width(self):
        return self._width

    def set_decay(self, decay):
        self._decay = decay
        return self

    def set_depth(self, depth):
        self._depth = depth
        return self

    def set_k(self, k):
        self._k = k
        return self

    def set_width(self, width):
        self._width = width
        return self


class ScanDumpResult(namedtuple('ScanDumpResult', ['iterator', 'data'])):
    """
    One step of an incremental dump: the iterator to pass to the next
    scan-dump call and the chunk to pass, unchanged and in order, to
    load-chunk. An iterator of 0 means the dump is complete. Unpacks as an
    (iterator, data) pair.
    """
    __slots__ = ()

    def get_data(self):
        """
        Returns the opaque chunk of this step.

        :returns: the chunk, or None if the server sent no payload.
        :rtype: bytes
        """
        return self.data

    def get_iterator(self):
        """
        Returns the iterator to continue the dump with.

        :returns: the iterator, 0 when the dump is complete.
        :rtype: int
        """
        return self.iterator

    def is_complete(self):
        return self.iterator == 0
