#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from collections.abc import Mapping
from logging import Logger
from time import ctime

from .exception import IllegalArgumentException


def enum(**enums):
    return type('Enum', (object,), enums)


class CheckValue:
    # Type checks only. Ranges are the server's business.

    @staticmethod
    def check_boolean(data, name):
        if data is not True and data is not False:
            raise IllegalArgumentException(name + ' must be True or False.')

    @staticmethod
    def check_bytes(data, name):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise IllegalArgumentException(name + ' must be a bytes type.')

    @staticmethod
    def check_float(data, name):
        if not CheckValue.is_number(data):
            raise IllegalArgumentException(
                name + ' must be a number. Got:' + str(data))

    @staticmethod
    def check_int(data, name):
        if not CheckValue.is_int(data):
            raise IllegalArgumentException(
                name + ' must be an integer. Got:' + str(data))

    @staticmethod
    def check_items(data, name):
        if (isinstance(data, (str, bytes, bytearray, Mapping)) or
                not isinstance(data, (list, tuple))):
            raise IllegalArgumentException(
                name + ' must be a list or tuple of items.')

    @staticmethod
    def check_key(data, name):
        if not isinstance(data, (str, bytes)):
            raise IllegalArgumentException(
                name + ' must be a string or bytes type.')

    @staticmethod
    def check_logger(data, name):
        if not isinstance(data, Logger):
            raise IllegalArgumentException(name + ' must be a Logger.')

    @staticmethod
    def check_not_none(data, name):
        if data is None:
            raise IllegalArgumentException(name + ' must be not-none.')

    @staticmethod
    def is_int(data):
        if (isinstance(data, int) and not isinstance(data, bool) and
                -pow(2, 63) <= data < pow(2, 63)):
            return True
        return False

    @staticmethod
    def is_number(data):
        return (CheckValue.is_int(data) or
                isinstance(data, float) and not isinstance(data, bool))


class Keywords:
    """
    Literal tokens of the probabilistic module's command grammar and the
    labels its INFO commands report. Label matching is exact, so the values
    must keep the server's spelling and casing.
    """
    OK = 'OK'

    # Flag tokens.
    BUCKET_SIZE = 'BUCKETSIZE'
    CAPACITY = 'CAPACITY'
    ERROR = 'ERROR'
    EXPANSION = 'EXPANSION'
    ITEMS = 'ITEMS'
    MAX_ITERATIONS = 'MAXITERATIONS'
    NO_CREATE = 'NOCREATE'
    NON_SCALING = 'NONSCALING'
    WEIGHTS = 'WEIGHTS'

    # Info labels, bloom and cuckoo filters.
    LABEL_CAPACITY = 'Capacity'
    LABEL_SIZE = 'Size'
    LABEL_NUMBER_OF_FILTERS = 'Number of filters'
    LABEL_NUMBER_OF_FILTERS_SINGULAR = 'Number of filter'
    LABEL_NUMBER_OF_ITEMS_INSERTED = 'Number of items inserted'
    LABEL_NUMBER_OF_ITEMS_DELETED = 'Number of items deleted'
    LABEL_NUMBER_OF_BUCKETS = 'Number of buckets'
    LABEL_EXPANSION_RATE = 'Expansion rate'
    LABEL_BUCKET_SIZE = 'Bucket size'
    LABEL_BUCKET_SIZE_CAPITALIZED = 'Bucket Size'
    LABEL_MAX_ITERATION = 'Max iteration'
    LABEL_MAX_ITERATIONS = 'Max iterations'

    # Info labels, count-min sketch and top-k.
    LABEL_K = 'k'
    LABEL_WIDTH = 'width'
    LABEL_DEPTH = 'depth'
    LABEL_DECAY = 'decay'
    LABEL_COUNT = 'count'


class LogUtils:

    def __init__(self, logger=None):
        self.__logger = logger

    def log_warning(self, msg):
        if self.__logger is not None:
            self.__logger.warning(ctime() + '[WARNING]' + msg)

    def log_debug(self, msg):
        if self.__logger is not None:
            self.__logger.debug(ctime() + '[DEBUG]' + msg)

    def is_enabled_for(self, level):
        return self.__logger is not None and self.__logger.isEnabledFor(level)
