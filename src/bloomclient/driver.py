#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from logging import WARNING, getLogger

from .client import Client
from .common import CheckValue
from .config import ClientConfig
from .exception import IllegalArgumentException, IllegalStateException


class CommandHandle(object):
    """
    Base class of the family clients. A handle binds the operations of one
    data-structure family to a connection. Every public operation follows
    the same pattern: it accepts typed parameters, sends one command and
    returns the decoded reply. With a :py:class:`redis.asyncio.Redis`
    connection, or when :py:meth:`ClientConfig.set_async_mode` is True, the
    operations return awaitables that resolve to the same results.

    Errors reported by the server, such as a missing key, a key that
    already exists or an invalid combination of options, are raised as
    :py:class:`redis.exceptions.ResponseError` and are not wrapped. Replies
    that do not have the shape a command defines raise
    :py:class:`ReplyDecodeException`.

    Handles hold no state besides the connection and may be shared between
    threads if the connection may.

    :param connection: the connection, or a :py:class:`ClientConfig`.
    :param config: the configuration, or None. When given, connection must be
        the connection of config.
    :type config: ClientConfig
    :raises IllegalArgumentException: raises the exception if connection has
        no execute_command method, or is not the connection of config.
    """
    # Method name to operation descriptor, read by the extensions module.
    OPERATIONS = {}
    # Prefix of the free functions generated for the family.
    EXTENSION_PREFIX = None

    def __init__(self, connection, config=None):
        if isinstance(connection, ClientConfig):
            if config is not None:
                raise IllegalArgumentException(
                    'config must be None when connection is a ClientConfig.')
            config = connection
        elif config is None:
            config = ClientConfig(connection)
        elif (not isinstance(config, ClientConfig) or
              config.get_connection() is not connection):
            raise IllegalArgumentException(
                'connection must be the connection of config.')
        logger = self._get_logger(config)
        self._client = Client(config, logger)

    def close(self):
        """
        Closes the handle. The connection is left open, it belongs to the
        application.
        """
        if self._client is not None:
            self._client.shut_down()
            self._client = None

    def get_client(self):
        # For testing use
        return self._client

    def is_async(self):
        """
        Returns whether the operations of this handle return awaitables.

        :returns: True for the awaitable convention.
        :rtype: bool
        """
        return self._check_open().is_async()

    def _check_open(self):
        if self._client is None:
            raise IllegalStateException(
                self.__class__.__name__ + ' has been closed.')
        return self._client

    def _execute(self, serializer, **params):
        return self._check_open().execute(serializer, params)

    @staticmethod
    def _check_items(items):
        CheckValue.check_items(items, 'items')

    @staticmethod
    def _get_logger(config):
        """
        Returns the logger used by the handle. If no logger is specified, use
        the package logger at WARNING level.
        """
        if config.get_logger() is None and config.is_default_logger():
            logger = getLogger('bloomclient')
            if logger.level == 0:
                logger.setLevel(WARNING)
        else:
            logger = config.get_logger()
        return logger
