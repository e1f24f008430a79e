#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from abc import ABCMeta, abstractmethod
from collections.abc import Mapping

from .commands import (
    BloomFilterCommand, CountMinSketchCommand, CuckooFilterCommand,
    TopKCommand)
from .common import Keywords
from .exception import ReplyDecodeException
from .operations import (
    BloomFilterInfo, CountMinSketchInfo, CuckooFilterInfo, ScanDumpResult,
    TopKInfo)
from .serdeutil import SerdeUtil

#
# Argument slots. An operation lists its slots in the order the command
# grammar defines; building walks them once and each slot appends its own
# tokens.
#


class Slot(object, metaclass=ABCMeta):
    """
    Base class of the argument slots.
    """

    def __init__(self, name):
        self._name = name

    def get_name(self):
        return self._name

    @abstractmethod
    def write(self, args, params):
        """
        Appends the tokens of this slot to args.
        """
        pass


class Arg(Slot):
    # Required positional value.

    def write(self, args, params):
        args.append(params[self._name])


class Bare(Slot):
    # Optional positional value, no token.

    def write(self, args, params):
        value = params.get(self._name)
        if value is not None:
            args.append(value)


class Option(Slot):
    """
    Optional flagged value: the token followed by the value, emitted whenever
    the value is not None. Zero and empty values are present values.
    """

    def __init__(self, name, token):
        super(Option, self).__init__(name)
        self._token = token

    def write(self, args, params):
        value = params.get(self._name)
        if value is not None:
            args.append(self._token)
            args.append(value)


class Switch(Slot):
    """
    Boolean flag: the token alone, emitted only when the value is True.
    """

    def __init__(self, name, token):
        super(Switch, self).__init__(name)
        self._token = token

    def write(self, args, params):
        if params.get(self._name) is True:
            args.append(self._token)


class Variadic(Slot):
    """
    Trailing items in caller order, preceded by a marker token when the
    grammar requires one.
    """

    def __init__(self, name, marker=None):
        super(Variadic, self).__init__(name)
        self._marker = marker

    def write(self, args, params):
        if self._marker is not None:
            args.append(self._marker)
        args.extend(params[self._name])


class Pairs(Slot):
    # Mapping or sequence of pairs, flattened to k1, v1, k2, v2, ...

    def write(self, args, params):
        value = params[self._name]
        pairs = value.items() if isinstance(value, Mapping) else value
        for k, v in pairs:
            args.append(k)
            args.append(v)


class CountedKeys(Slot):
    """
    Source keys of a merge: the number of keys, then every key. When the
    keys come as a mapping of key to weight, the weights token and one weight
    per key follow, in the order of the keys.
    """

    def __init__(self, name, weights_token):
        super(CountedKeys, self).__init__(name)
        self._weights_token = weights_token

    def write(self, args, params):
        value = params[self._name]
        if isinstance(value, Mapping):
            keys = list(value.keys())
            args.append(len(keys))
            args.extend(keys)
            args.append(self._weights_token)
            args.extend(value[k] for k in keys)
        else:
            keys = list(value)
            args.append(len(keys))
            args.extend(keys)

#
# Reply decoders.
#


class ReplyDecoder(object, metaclass=ABCMeta):
    """
    Base class of the reply decoders. Decoders are pure: decoding the same
    reply twice returns equal results.
    """

    @abstractmethod
    def decode(self, reply):
        pass


class StatusDecoder(ReplyDecoder):
    # True only for the literal success status, never fails.

    def decode(self, reply):
        if reply is None or SerdeUtil.reply_type(reply) in (
                SerdeUtil.REPLY_TYPE.ARRAY, SerdeUtil.REPLY_TYPE.MAP):
            return False
        return SerdeUtil.to_text(reply) == Keywords.OK


class ScalarDecoder(ReplyDecoder):

    def __init__(self, reader):
        self._reader = reader

    def decode(self, reply):
        return self._reader(reply)


class ArrayDecoder(ReplyDecoder):

    def __init__(self, reader):
        self._reader = reader

    def decode(self, reply):
        return [self._reader(element)
                for element in SerdeUtil.read_array(reply)]


class FirstElementDecoder(ReplyDecoder):
    # One-element array reply of a single-item command.

    def __init__(self, reader):
        self._reader = reader

    def decode(self, reply):
        elements = SerdeUtil.read_array(reply)
        if len(elements) != 1:
            raise ReplyDecodeException(
                'Expected 1 element, got ' + str(len(elements)), reply=reply)
        return self._reader(elements[0])


class ScanDumpDecoder(ReplyDecoder):

    def decode(self, reply):
        elements = SerdeUtil.read_array(reply)
        if len(elements) != 2:
            raise ReplyDecodeException(
                'Expected an (iterator, data) pair, got ' +
                str(len(elements)) + ' elements', reply=reply)
        return ScanDumpResult(SerdeUtil.read_int(elements[0]),
                              SerdeUtil.read_nullable_bytes(elements[1]))


class InfoDecoder(ReplyDecoder):
    """
    Decodes a label/value reply into a result record. The label table maps
    each recognized label to the setter of the record and the reader of the
    value. Labels missing from the table are skipped along with their value,
    so fields added by newer servers do not break the decoding.

    :param result_class: the class of the record to create.
    :param labels: dict of label to (setter name, reader).
    """

    def __init__(self, result_class, labels):
        self._result_class = result_class
        self._labels = labels

    def decode(self, reply):
        result = self._result_class()
        for label, value in SerdeUtil.read_pairs(reply):
            entry = self._labels.get(label)
            if entry is None:
                continue
            setter, reader = entry
            getattr(result, setter)(reader(value))
        return result


class CommandSerializer(object):
    """
    Describes one operation: its command keyword, the slots its arguments
    are built from and the decoder of its reply.

    :param command: the command keyword.
    :type command: str
    :param slots: the argument slots, in grammar order.
    :type slots: tuple
    :param decoder: the reply decoder.
    :type decoder: ReplyDecoder
    """

    def __init__(self, command, slots, decoder):
        self._command = command
        self._slots = slots
        self._decoder = decoder

    def __str__(self):
        return 'CommandSerializer(' + self._command + ')'

    def deserialize(self, reply):
        """
        Decodes the reply of the command.

        :param reply: the raw reply.
        :returns: the typed result.
        :raises ReplyDecodeException: raises the exception if the reply does
            not have the expected shape.
        """
        try:
            return self._decoder.decode(reply)
        except ReplyDecodeException as rde:
            if rde.get_command() is not None:
                raise
            raise rde.with_command(self._command)

    def get_command(self):
        return self._command

    def get_slot_names(self):
        return [slot.get_name() for slot in self._slots]

    def serialize(self, params):
        """
        Builds the argument list of the command. Never validates values.

        :param params: the parameters, keyed by slot name.
        :type params: dict
        :returns: the arguments, the command keyword excluded.
        :rtype: list
        """
        args = []
        for slot in self._slots:
            slot.write(args, params)
        return args


STATUS = StatusDecoder()
BOOLEAN = ScalarDecoder(SerdeUtil.read_boolean)
INTEGER = ScalarDecoder(SerdeUtil.read_int)
BOOLEAN_ARRAY = ArrayDecoder(SerdeUtil.read_boolean)
INTEGER_ARRAY = ArrayDecoder(SerdeUtil.read_int)
STRING_ARRAY = ArrayDecoder(SerdeUtil.read_nullable_string)
SCAN_DUMP = ScanDumpDecoder()

#
# Operation tables, one per family.
#


class BloomFilterProtocol(object):
    RESERVE = CommandSerializer(
        BloomFilterCommand.RESERVE,
        # The grammar puts the error rate before the capacity.
        (Arg('key'), Arg('error_rate'), Arg('capacity'),
         Option('expansion', Keywords.EXPANSION),
         Switch('non_scaling', Keywords.NON_SCALING)),
        STATUS)
    ADD = CommandSerializer(
        BloomFilterCommand.ADD, (Arg('key'), Arg('item')), BOOLEAN)
    ADD_MULTIPLE = CommandSerializer(
        BloomFilterCommand.ADD_MULTIPLE, (Arg('key'), Variadic('items')),
        BOOLEAN_ARRAY)
    EXISTS = CommandSerializer(
        BloomFilterCommand.EXISTS, (Arg('key'), Arg('item')), BOOLEAN)
    EXISTS_MULTIPLE = CommandSerializer(
        BloomFilterCommand.EXISTS_MULTIPLE, (Arg('key'), Variadic('items')),
        BOOLEAN_ARRAY)
    INSERT = CommandSerializer(
        BloomFilterCommand.INSERT,
        (Arg('key'),
         Option('capacity', Keywords.CAPACITY),
         Option('error_rate', Keywords.ERROR),
         Option('expansion', Keywords.EXPANSION),
         Switch('no_create', Keywords.NO_CREATE),
         Switch('non_scaling', Keywords.NON_SCALING),
         Variadic('items', Keywords.ITEMS)),
        BOOLEAN_ARRAY)
    INFO = CommandSerializer(
        BloomFilterCommand.INFO, (Arg('key'),),
        InfoDecoder(BloomFilterInfo, {
            Keywords.LABEL_CAPACITY: ('set_capacity', SerdeUtil.read_int),
            Keywords.LABEL_SIZE: ('set_size', SerdeUtil.read_int),
            Keywords.LABEL_NUMBER_OF_FILTERS:
                ('set_number_of_filters', SerdeUtil.read_int),
            Keywords.LABEL_NUMBER_OF_ITEMS_INSERTED:
                ('set_number_of_items_inserted', SerdeUtil.read_int),
            Keywords.LABEL_EXPANSION_RATE:
                ('set_expansion_rate', SerdeUtil.read_nullable_int)}))
    SCAN_DUMP = CommandSerializer(
        BloomFilterCommand.SCAN_DUMP, (Arg('key'), Arg('iterator')),
        SCAN_DUMP)
    LOAD_CHUNK = CommandSerializer(
        BloomFilterCommand.LOAD_CHUNK,
        (Arg('key'), Arg('iterator'), Arg('data')), STATUS)


class CuckooFilterProtocol(object):
    RESERVE = CommandSerializer(
        CuckooFilterCommand.RESERVE,
        (Arg('key'), Arg('capacity'),
         Option('bucket_size', Keywords.BUCKET_SIZE),
         Option('max_iterations', Keywords.MAX_ITERATIONS),
         Option('expansion', Keywords.EXPANSION)),
        STATUS)
    ADD = CommandSerializer(
        CuckooFilterCommand.ADD, (Arg('key'), Arg('item')), BOOLEAN)
    ADD_ADVANCED = CommandSerializer(
        CuckooFilterCommand.ADD_ADVANCED, (Arg('key'), Arg('item')), BOOLEAN)
    INSERT = CommandSerializer(
        CuckooFilterCommand.INSERT,
        (Arg('key'),
         Option('capacity', Keywords.CAPACITY),
         Switch('no_create', Keywords.NO_CREATE),
         Variadic('items', Keywords.ITEMS)),
        BOOLEAN_ARRAY)
    INSERT_ADVANCED = CommandSerializer(
        CuckooFilterCommand.INSERT_ADVANCED,
        (Arg('key'),
         Option('capacity', Keywords.CAPACITY),
         Switch('no_create', Keywords.NO_CREATE),
         Variadic('items', Keywords.ITEMS)),
        BOOLEAN_ARRAY)
    EXISTS = CommandSerializer(
        CuckooFilterCommand.EXISTS, (Arg('key'), Arg('item')), BOOLEAN)
    DELETE = CommandSerializer(
        CuckooFilterCommand.DELETE, (Arg('key'), Arg('item')), BOOLEAN)
    COUNT = CommandSerializer(
        CuckooFilterCommand.COUNT, (Arg('key'), Arg('item')), INTEGER)
    SCAN_DUMP = CommandSerializer(
        CuckooFilterCommand.SCAN_DUMP, (Arg('key'), Arg('iterator')),
        SCAN_DUMP)
    LOAD_CHUNK = CommandSerializer(
        CuckooFilterCommand.LOAD_CHUNK,
        (Arg('key'), Arg('iterator'), Arg('data')), STATUS)
    # Servers and older tables disagree on some label spellings, all of them
    # are recognized.
    INFO = CommandSerializer(
        CuckooFilterCommand.INFO, (Arg('key'),),
        InfoDecoder(CuckooFilterInfo, {
            Keywords.LABEL_SIZE: ('set_size', SerdeUtil.read_int),
            Keywords.LABEL_NUMBER_OF_BUCKETS:
                ('set_number_of_buckets', SerdeUtil.read_int),
            Keywords.LABEL_NUMBER_OF_FILTERS:
                ('set_number_of_filters', SerdeUtil.read_int),
            Keywords.LABEL_NUMBER_OF_FILTERS_SINGULAR:
                ('set_number_of_filters', SerdeUtil.read_int),
            Keywords.LABEL_NUMBER_OF_ITEMS_INSERTED:
                ('set_number_of_items_inserted', SerdeUtil.read_int),
            Keywords.LABEL_NUMBER_OF_ITEMS_DELETED:
                ('set_number_of_items_deleted', SerdeUtil.read_int),
            Keywords.LABEL_BUCKET_SIZE:
                ('set_bucket_size', SerdeUtil.read_int),
            Keywords.LABEL_BUCKET_SIZE_CAPITALIZED:
                ('set_bucket_size', SerdeUtil.read_int),
            Keywords.LABEL_EXPANSION_RATE:
                ('set_expansion_rate', SerdeUtil.read_int),
            Keywords.LABEL_MAX_ITERATION:
                ('set_max_iterations', SerdeUtil.read_int),
            Keywords.LABEL_MAX_ITERATIONS:
                ('set_max_iterations', SerdeUtil.read_int),
            Keywords.MAX_ITERATIONS:
                ('set_max_iterations', SerdeUtil.read_int)}))


class CountMinSketchProtocol(object):
    INIT_BY_DIM = CommandSerializer(
        CountMinSketchCommand.INIT_BY_DIM,
        (Arg('key'), Arg('width'), Arg('depth')), STATUS)
    INIT_BY_PROB = CommandSerializer(
        CountMinSketchCommand.INIT_BY_PROB,
        (Arg('key'), Arg('error'), Arg('probability')), STATUS)
    INCR_BY = CommandSerializer(
        CountMinSketchCommand.INCR_BY,
        (Arg('key'), Arg('item'), Arg('increment')),
        FirstElementDecoder(SerdeUtil.read_int))
    INCR_BY_MULTIPLE = CommandSerializer(
        CountMinSketchCommand.INCR_BY, (Arg('key'), Pairs('increments')),
        INTEGER_ARRAY)
    QUERY = CommandSerializer(
        CountMinSketchCommand.QUERY, (Arg('key'), Variadic('items')),
        INTEGER_ARRAY)
    MERGE = CommandSerializer(
        CountMinSketchCommand.MERGE,
        (Arg('dest'), CountedKeys('sources', Keywords.WEIGHTS)), STATUS)
    INFO = CommandSerializer(
        CountMinSketchCommand.INFO, (Arg('key'),),
        InfoDecoder(CountMinSketchInfo, {
            Keywords.LABEL_WIDTH: ('set_width', SerdeUtil.read_int),
            Keywords.LABEL_DEPTH: ('set_depth', SerdeUtil.read_int),
            Keywords.LABEL_COUNT: ('set_count', SerdeUtil.read_int)}))


class TopKProtocol(object):
    RESERVE = CommandSerializer(
        TopKCommand.RESERVE,
        (Arg('key'), Arg('topk'), Bare('width'), Bare('depth'),
         Bare('decay')),
        STATUS)
    ADD = CommandSerializer(
        TopKCommand.ADD, (Arg('key'), Variadic('items')), STRING_ARRAY)
    INCREMENT_BY = CommandSerializer(
        TopKCommand.INCREMENT_BY,
        (Arg('key'), Arg('item'), Arg('increment')),
        FirstElementDecoder(SerdeUtil.read_nullable_string))
    QUERY = CommandSerializer(
        TopKCommand.QUERY, (Arg('key'), Variadic('items')), BOOLEAN_ARRAY)
    COUNT = CommandSerializer(
        TopKCommand.COUNT, (Arg('key'), Variadic('items')), INTEGER_ARRAY)
    LIST = CommandSerializer(
        TopKCommand.LIST, (Arg('key'),), STRING_ARRAY)
    INFO = CommandSerializer(
        TopKCommand.INFO, (Arg('key'),),
        InfoDecoder(TopKInfo, {
            Keywords.LABEL_K: ('set_k', SerdeUtil.read_int),
            Keywords.LABEL_WIDTH: ('set_width', SerdeUtil.read_int),
            Keywords.LABEL_DEPTH: ('set_depth', SerdeUtil.read_int),
            Keywords.LABEL_DECAY: ('set_decay', SerdeUtil.read_float)}))
