#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from inspect import iscoroutinefunction
from logging import DEBUG

from redis.exceptions import RedisError

from .common import CheckValue, LogUtils
from .exception import IllegalStateException, ReplyDecodeException


class Client(object):
    """
    Internal use only.

    The command execution path shared by every family client. Arguments are
    built and the reply decoded here, only the submission of the command is
    delegated to a channel, so the blocking and the awaitable conventions
    cannot differ in what they send or in how they decode.
    """

    def __init__(self, config, logger):
        self._logutils = LogUtils(logger)
        self._config = config
        self._connection = config.get_connection()
        async_mode = config.get_async_mode()
        if async_mode is None:
            async_mode = iscoroutinefunction(
                self._connection.execute_command)
        if async_mode:
            self._channel = AsyncChannel(self)
        else:
            self._channel = SyncChannel(self)
        self._shut_down = False
        self._logutils.log_debug(
            'Starting client with ' + self._channel.__class__.__name__)

    def decode(self, serializer, reply):
        try:
            return serializer.deserialize(reply)
        except ReplyDecodeException as rde:
            self._logutils.log_warning(
                'Unexpected reply: ' + str(rde) + ', reply: ' + repr(reply))
            raise
        except RedisError as re:
            self.log_failure(serializer, re)
            raise

    def execute(self, serializer, params):
        """
        Execute the command described by serializer and return its decoded
        reply, or, with the awaitable convention, an awaitable of it.

        Errors raised by the connection, including the errors reported by
        the server, are propagated unchanged. Nothing is retried.

        :param serializer: the operation to execute.
        :type serializer: CommandSerializer
        :param params: the parameters of the operation.
        :type params: dict
        :returns: the typed result, or an awaitable of it.
        :raises IllegalStateException: raises the exception if the client has
            been closed.
        """
        CheckValue.check_not_none(serializer, 'serializer')
        if self._shut_down:
            raise IllegalStateException('Client has been closed.')
        args = serializer.serialize(params)
        if self._logutils.is_enabled_for(DEBUG):
            self._logutils.log_debug(
                'Command: ' + serializer.get_command() + ', ' +
                str(len(args)) + ' arguments')
        return self._channel.submit(serializer, args)

    def get_connection(self):
        return self._connection

    def is_async(self):
        return isinstance(self._channel, AsyncChannel)

    def log_failure(self, serializer, error):
        if self._logutils.is_enabled_for(DEBUG):
            self._logutils.log_debug(
                'Command ' + serializer.get_command() + ' failed: ' +
                error.__class__.__name__ + ': ' + str(error))

    def shut_down(self):
        # The connection belongs to the application and stays open.
        self._logutils.log_debug('Shutting down client')
        self._shut_down = True


class SyncChannel(object):
    # Blocks until the reply is available.

    def __init__(self, client):
        self._client = client

    def submit(self, serializer, args):
        try:
            reply = self._client.get_connection().execute_command(
                serializer.get_command(), *args)
        except RedisError as re:
            self._client.log_failure(serializer, re)
            raise
        return self._client.decode(serializer, reply)


class AsyncChannel(object):
    # Returns a coroutine; nothing is sent before it is awaited.

    def __init__(self, client):
        self._client = client

    def submit(self, serializer, args):
        return self._complete(serializer, args)

    async def _complete(self, serializer, args):
        try:
            reply = await self._client.get_connection().execute_command(
                serializer.get_command(), *args)
        except RedisError as re:
            self._client.log_failure(serializer, re)
            raise
        return self._client.decode(serializer, reply)
