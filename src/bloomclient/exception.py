#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#


class IllegalArgumentException(RuntimeError):
    """
    Exception class that is used when an invalid argument was passed, this could
    mean that the type is not the expected or the value is not valid for the
    specific case.

    Only argument types are checked locally. Value ranges and flag
    combinations are validated by the server, which reports them as
    :py:class:`redis.exceptions.ResponseError`.
    """

    def __init__(self, message=None, cause=None):
        super(IllegalArgumentException, self).__init__(message)
        self._message = message
        self._cause = cause

    def __str__(self):
        return self._message

    def get_cause(self):
        """
        Get the cause of the exception.

        :returns: the cause of the exception.
        :rtype: RuntimeError
        """
        return self._cause


class IllegalStateException(RuntimeError):
    """
    Exception that is thrown when a method has been invoked at an illegal or
    inappropriate time, for example on a client that has been closed.
    """

    def __init__(self, message=None, cause=None):
        super(IllegalStateException, self).__init__(message)
        self._message = message
        self._cause = cause

    def __str__(self):
        return self._message

    def get_cause(self):
        """
        Get the cause of the exception.

        :returns: the cause of the exception.
        :rtype: RuntimeError
        """
        return self._cause


class BloomClientException(RuntimeError):
    """
    A base class for the exceptions raised locally by the client. Errors
    reported by the server are not wrapped: they reach the caller as the
    connection library raised them.
    """

    def __init__(self, message, cause=None):
        super(BloomClientException, self).__init__(message)
        self._message = message
        self._cause = cause

    def __str__(self):
        return self._message

    def get_cause(self):
        """
        Get the cause of the exception.

        :returns: the cause of the exception.
        :rtype: RuntimeError
        """
        return self._cause


class ReplyDecodeException(BloomClientException):
    """
    The reply returned for a command does not have the shape the command
    defines, such as an array where an integer was expected, a label/value
    sequence of odd length or an element that is not a number. This is a
    contract violation between the client and the server module and is never
    retried.

    :param message: the description of the mismatch.
    :type message: str
    :param command: the command keyword the reply belongs to, if known.
    :type command: str
    :param reply: the offending reply, or the offending part of it.
    """

    def __init__(self, message, command=None, reply=None, cause=None):
        if command is not None:
            message = command + ': ' + message
        super(ReplyDecodeException, self).__init__(message, cause)
        self._command = command
        self._reply = reply

    def get_command(self):
        """
        Returns the command keyword whose reply failed to decode.

        :returns: the command keyword, or None if not known.
        :rtype: str
        """
        return self._command

    def get_reply(self):
        """
        Returns the reply, or the part of it, that failed to decode.

        :returns: the raw reply value.
        """
        return self._reply

    def with_command(self, command):
        # Decoders do not know which command they serve. The serializer
        # re-raises their failures with the keyword attached.
        return ReplyDecodeException(self._message, command, self._reply,
                                    self._cause)
