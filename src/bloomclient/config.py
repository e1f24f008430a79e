#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from copy import copy

from .common import CheckValue
from .exception import IllegalArgumentException


class ClientConfig(object):
    """
    Configuration of the family clients. It carries the connection the
    commands are sent through, the logger and the calling convention.

    The connection is any object with an ``execute_command(*args)`` method
    in the style of :py:class:`redis.Redis`, or of
    :py:class:`redis.asyncio.Redis` for the awaitable convention. It is
    owned by the application: the clients never open, pool or close it, and
    transport settings such as timeouts, retries and the protocol version
    are configured on it. Binary payloads returned by scan-dump require a
    connection that does not decode responses.

    :param connection: the connection to execute commands with.
    :raises IllegalArgumentException: raises the exception if connection has
        no execute_command method.
    """

    def __init__(self, connection):
        ClientConfig._check_connection(connection)
        self._connection = connection
        self._logger = None
        self._is_default_logger = True
        self._async_mode = None

    def clone(self):
        """
        All the configurations will be copied. The connection and the logger
        are shared with the copy, not duplicated.

        :returns: the copy of the instance.
        :rtype: ClientConfig
        """
        return copy(self)

    def get_async_mode(self):
        """
        Returns the calling convention setting.

        :returns: True for awaitable calls, False for blocking calls or None
            if it is detected from the connection.
        :rtype: bool
        """
        return self._async_mode

    def get_connection(self):
        """
        Returns the connection commands are executed with.

        :returns: the connection.
        """
        return self._connection

    def get_logger(self):
        """
        Returns the logger, or None if not configured by user.

        :returns: the logger.
        :rtype: Logger
        """
        return self._logger

    def is_default_logger(self):
        # Internal use only
        return self._is_default_logger

    def set_async_mode(self, async_mode):
        """
        Sets the calling convention of the clients created with this
        configuration. By default it is detected: a connection whose
        execute_command is a coroutine function gets awaitable calls.

        :param async_mode: True to return awaitables, False to block.
        :type async_mode: bool
        :returns: self.
        :raises IllegalArgumentException: raises the exception if async_mode
            is not a boolean.
        """
        CheckValue.check_boolean(async_mode, 'async_mode')
        self._async_mode = async_mode
        return self

    def set_logger(self, logger):
        """
        Sets the logger used by the clients.

        :param logger: the logger.
        :type logger: Logger
        :returns: self.
        :raises IllegalArgumentException: raises the exception if logger is not
            an instance of Logger.
        """
        CheckValue.check_logger(logger, 'logger')
        self._logger = logger
        self._is_default_logger = False
        return self

    @staticmethod
    def _check_connection(connection):
        if not callable(getattr(connection, 'execute_command', None)):
            raise IllegalArgumentException(
                'connection must provide an execute_command method.')
