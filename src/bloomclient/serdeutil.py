#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from .common import enum
from .exception import ReplyDecodeException


class SerdeUtil(object):
    """
    A class to encapsulate static methods used by the reply decoders. Replies
    arrive from the connection as plain Python values; every value is first
    classified into one of the closed set of :py:attr:`REPLY_TYPE` variants
    and each read method accepts only the variants that make sense for it,
    raising :py:class:`ReplyDecodeException` for anything else.
    """

    # Reply variants. STRING is produced instead of BYTES when the connection
    # decodes responses; BOOLEAN, DOUBLE and MAP only appear with RESP3.
    REPLY_TYPE = enum(NIL=0,
                      BOOLEAN=1,
                      INTEGER=2,
                      DOUBLE=3,
                      BYTES=4,
                      STRING=5,
                      ARRAY=6,
                      MAP=7)

    ENCODING = 'utf-8'

    @staticmethod
    def reply_type(reply):
        """
        Classifies a raw reply.

        :param reply: the reply as returned by the connection.
        :returns: one of the :py:attr:`REPLY_TYPE` values.
        :rtype: int
        :raises ReplyDecodeException: raises the exception if the reply is of
            a type no command of this client produces.
        :raises ResponseError: raises the error the server reported in place
            of the reply.
        """
        if reply is None:
            return SerdeUtil.REPLY_TYPE.NIL
        # The connection returns the error of a single element in place of
        # the element. It is the server's answer and is raised as is.
        if isinstance(reply, Exception):
            raise reply
        # bool is a subclass of int, test it first.
        if isinstance(reply, bool):
            return SerdeUtil.REPLY_TYPE.BOOLEAN
        if isinstance(reply, int):
            return SerdeUtil.REPLY_TYPE.INTEGER
        if isinstance(reply, float):
            return SerdeUtil.REPLY_TYPE.DOUBLE
        if isinstance(reply, (bytes, bytearray)):
            return SerdeUtil.REPLY_TYPE.BYTES
        if isinstance(reply, str):
            return SerdeUtil.REPLY_TYPE.STRING
        if isinstance(reply, (list, tuple)):
            return SerdeUtil.REPLY_TYPE.ARRAY
        if isinstance(reply, dict):
            return SerdeUtil.REPLY_TYPE.MAP
        raise ReplyDecodeException(
            'Unsupported reply type: ' + type(reply).__name__, reply=reply)

    @staticmethod
    def is_text(reply):
        return SerdeUtil.reply_type(reply) in (SerdeUtil.REPLY_TYPE.BYTES,
                                               SerdeUtil.REPLY_TYPE.STRING)

    @staticmethod
    def to_text(reply):
        """
        Returns the textual form of a scalar reply. Bytes are decoded as
        UTF-8, other scalars are converted with str().
        """
        if isinstance(reply, (bytes, bytearray)):
            try:
                return bytes(reply).decode(SerdeUtil.ENCODING)
            except UnicodeDecodeError as ude:
                raise ReplyDecodeException(
                    'Reply is not valid UTF-8 text', reply=reply, cause=ude)
        return str(reply)

    @staticmethod
    def read_array(reply):
        """
        Reads an array reply.

        :param reply: the raw reply.
        :returns: the elements of the array, in server order.
        :rtype: list
        """
        if SerdeUtil.reply_type(reply) != SerdeUtil.REPLY_TYPE.ARRAY:
            raise SerdeUtil._mismatch('an array', reply)
        return list(reply)

    @staticmethod
    def read_boolean(reply):
        # Integer 0/1 in RESP2, true boolean in RESP3.
        t = SerdeUtil.reply_type(reply)
        if t == SerdeUtil.REPLY_TYPE.BOOLEAN:
            return reply
        if t == SerdeUtil.REPLY_TYPE.INTEGER:
            return reply != 0
        raise SerdeUtil._mismatch('a boolean', reply)

    @staticmethod
    def read_bytes(reply):
        """
        Reads a binary bulk reply. Text replies are rejected: a binary
        payload only survives a connection that does not decode responses.

        :param reply: the raw reply.
        :returns: the payload.
        :rtype: bytes
        """
        if SerdeUtil.reply_type(reply) != SerdeUtil.REPLY_TYPE.BYTES:
            raise SerdeUtil._mismatch('a binary payload', reply)
        return bytes(reply)

    @staticmethod
    def read_float(reply):
        """
        Reads a floating-point value. Some module versions report doubles as
        bulk strings, those are parsed.

        :param reply: the raw reply.
        :returns: the value.
        :rtype: float
        """
        t = SerdeUtil.reply_type(reply)
        if t in (SerdeUtil.REPLY_TYPE.DOUBLE, SerdeUtil.REPLY_TYPE.INTEGER):
            return float(reply)
        if t in (SerdeUtil.REPLY_TYPE.BYTES, SerdeUtil.REPLY_TYPE.STRING):
            try:
                return float(SerdeUtil.to_text(reply))
            except ValueError as ve:
                raise ReplyDecodeException(
                    'Expected a floating-point number', reply=reply, cause=ve)
        raise SerdeUtil._mismatch('a floating-point number', reply)

    @staticmethod
    def read_int(reply):
        """
        Reads an integer value. Numerals sent as bulk strings are parsed.

        :param reply: the raw reply.
        :returns: the value.
        :rtype: int
        """
        t = SerdeUtil.reply_type(reply)
        if t == SerdeUtil.REPLY_TYPE.INTEGER:
            return reply
        if t in (SerdeUtil.REPLY_TYPE.BYTES, SerdeUtil.REPLY_TYPE.STRING):
            try:
                return int(SerdeUtil.to_text(reply))
            except ValueError as ve:
                raise ReplyDecodeException(
                    'Expected an integer', reply=reply, cause=ve)
        raise SerdeUtil._mismatch('an integer', reply)

    @staticmethod
    def read_nullable_bytes(reply):
        if reply is None:
            return None
        return SerdeUtil.read_bytes(reply)

    @staticmethod
    def read_nullable_int(reply):
        if reply is None:
            return None
        return SerdeUtil.read_int(reply)

    @staticmethod
    def read_nullable_string(reply):
        if reply is None:
            return None
        return SerdeUtil.read_string(reply)

    @staticmethod
    def read_pairs(reply):
        """
        Reads a label/value reply. RESP2 sends a flat array alternating labels
        and values, RESP3 a map. Either way the pairs are returned in server
        order with the labels converted to str.

        :param reply: the raw reply.
        :returns: the (label, raw value) pairs.
        :rtype: list
        :raises ReplyDecodeException: raises the exception if the array has an
            odd number of elements or a label is not text.
        """
        t = SerdeUtil.reply_type(reply)
        if t == SerdeUtil.REPLY_TYPE.MAP:
            pairs = list(reply.items())
        elif t == SerdeUtil.REPLY_TYPE.ARRAY:
            if len(reply) % 2 != 0:
                raise ReplyDecodeException(
                    'Expected label/value pairs, got ' + str(len(reply)) +
                    ' elements', reply=reply)
            pairs = [(reply[i], reply[i + 1]) for i in range(0, len(reply), 2)]
        else:
            raise SerdeUtil._mismatch('label/value pairs', reply)
        result = []
        for label, value in pairs:
            if not SerdeUtil.is_text(label):
                raise SerdeUtil._mismatch('a text label', label)
            result.append((SerdeUtil.to_text(label), value))
        return result

    @staticmethod
    def read_string(reply):
        """
        Reads a text reply. Items are stored as sent, so an item that was
        added as binary and is not valid UTF-8 is returned as bytes.
        """
        if not SerdeUtil.is_text(reply):
            raise SerdeUtil._mismatch('a string', reply)
        if isinstance(reply, (bytes, bytearray)):
            try:
                return bytes(reply).decode(SerdeUtil.ENCODING)
            except UnicodeDecodeError:
                return bytes(reply)
        return reply

    @staticmethod
    def _mismatch(expected, reply):
        return ReplyDecodeException(
            'Expected ' + expected + ', got ' + type(reply).__name__,
            reply=reply)
