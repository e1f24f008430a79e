#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

import unittest
from collections import OrderedDict

from redis.exceptions import ResponseError

from bloomclient import (
    BloomFilterInfo, CountMinSketchInfo, CuckooFilterInfo,
    ReplyDecodeException, ScanDumpResult, TopKInfo)
from bloomclient.serde import (
    BloomFilterProtocol, CountMinSketchProtocol, CuckooFilterProtocol,
    TopKProtocol)


class TestArgumentBuilder(unittest.TestCase):

    def testBloomReserveErrorRateBeforeCapacity(self):
        args = BloomFilterProtocol.RESERVE.serialize(
            {'key': 'bf', 'capacity': 100, 'error_rate': 0.01})
        self.assertEqual(args, ['bf', 0.01, 100])

    def testBloomReserveOptionalValues(self):
        args = BloomFilterProtocol.RESERVE.serialize(
            {'key': 'bf', 'capacity': 100, 'error_rate': 0.01,
             'expansion': 2, 'non_scaling': True})
        self.assertEqual(args, ['bf', 0.01, 100, 'EXPANSION', 2, 'NONSCALING'])

    def testBloomReserveZeroExpansionIsPresent(self):
        args = BloomFilterProtocol.RESERVE.serialize(
            {'key': 'bf', 'capacity': 100, 'error_rate': 0.01,
             'expansion': 0, 'non_scaling': False})
        self.assertEqual(args, ['bf', 0.01, 100, 'EXPANSION', 0])

    def testBloomReserveAbsentValues(self):
        args = BloomFilterProtocol.RESERVE.serialize(
            {'key': 'bf', 'capacity': 100, 'error_rate': 0.01,
             'expansion': None, 'non_scaling': None})
        self.assertNotIn('EXPANSION', args)
        self.assertNotIn('NONSCALING', args)
        self.assertEqual(len(args), 3)

    def testBloomInsertFlagOrder(self):
        args = BloomFilterProtocol.INSERT.serialize(
            {'key': 'bf', 'items': ['a', 'b'], 'capacity': 1000,
             'error_rate': 0.001, 'expansion': 4, 'no_create': True,
             'non_scaling': True})
        self.assertEqual(
            args, ['bf', 'CAPACITY', 1000, 'ERROR', 0.001, 'EXPANSION', 4,
                   'NOCREATE', 'NONSCALING', 'ITEMS', 'a', 'b'])

    def testBloomInsertWithoutOptions(self):
        args = BloomFilterProtocol.INSERT.serialize(
            {'key': 'bf', 'items': ['a', 'b', 'c']})
        self.assertEqual(args, ['bf', 'ITEMS', 'a', 'b', 'c'])

    def testBloomInsertSingleOption(self):
        for name, token, value in (('capacity', 'CAPACITY', 0),
                                   ('error_rate', 'ERROR', 0.0),
                                   ('expansion', 'EXPANSION', 0)):
            args = BloomFilterProtocol.INSERT.serialize(
                {'key': 'bf', 'items': ['a'], name: value})
            self.assertEqual(args, ['bf', token, value, 'ITEMS', 'a'])
            self.assertEqual(args.count(token), 1)

    def testVariadicItemsKeepOrder(self):
        items = ['z', 'a', 'm', 'a']
        for serializer in (BloomFilterProtocol.ADD_MULTIPLE,
                           BloomFilterProtocol.EXISTS_MULTIPLE,
                           CountMinSketchProtocol.QUERY, TopKProtocol.ADD,
                           TopKProtocol.QUERY, TopKProtocol.COUNT):
            args = serializer.serialize({'key': 'k', 'items': items})
            self.assertEqual(args, ['k'] + items)

    def testCuckooReserveFlagOrder(self):
        args = CuckooFilterProtocol.RESERVE.serialize(
            {'key': 'cf', 'capacity': 1000, 'bucket_size': 4,
             'max_iterations': 20, 'expansion': 1})
        self.assertEqual(
            args, ['cf', 1000, 'BUCKETSIZE', 4, 'MAXITERATIONS', 20,
                   'EXPANSION', 1])

    def testCuckooReserveSubsetOfOptions(self):
        args = CuckooFilterProtocol.RESERVE.serialize(
            {'key': 'cf', 'capacity': 1000, 'max_iterations': 0})
        self.assertEqual(args, ['cf', 1000, 'MAXITERATIONS', 0])

    def testCuckooInsert(self):
        for serializer in (CuckooFilterProtocol.INSERT,
                           CuckooFilterProtocol.INSERT_ADVANCED):
            self.assertEqual(
                serializer.serialize({'key': 'cf', 'items': ['x']}),
                ['cf', 'ITEMS', 'x'])
            self.assertEqual(
                serializer.serialize({'key': 'cf', 'items': ['x', 'y'],
                                      'capacity': 0, 'no_create': True}),
                ['cf', 'CAPACITY', 0, 'NOCREATE', 'ITEMS', 'x', 'y'])
            self.assertEqual(
                serializer.serialize({'key': 'cf', 'items': ['x'],
                                      'no_create': False}),
                ['cf', 'ITEMS', 'x'])

    def testMergeSequenceOfKeys(self):
        args = CountMinSketchProtocol.MERGE.serialize(
            {'dest': 'C', 'sources': ['A', 'B']})
        self.assertEqual(args, ['C', 2, 'A', 'B'])

    def testMergeWeightsFollowKeys(self):
        args = CountMinSketchProtocol.MERGE.serialize(
            {'dest': 'C', 'sources': OrderedDict([('B', 3), ('A', 1)])})
        self.assertEqual(args, ['C', 2, 'B', 'A', 'WEIGHTS', 3, 1])

    def testIncrByMultiple(self):
        expected = ['k', 'foo', 5, 'bar', 1]
        self.assertEqual(
            CountMinSketchProtocol.INCR_BY_MULTIPLE.serialize(
                {'key': 'k', 'increments': OrderedDict(
                    [('foo', 5), ('bar', 1)])}),
            expected)
        self.assertEqual(
            CountMinSketchProtocol.INCR_BY_MULTIPLE.serialize(
                {'key': 'k', 'increments': [('foo', 5), ('bar', 1)]}),
            expected)

    def testTopKReserveBareValues(self):
        serializer = TopKProtocol.RESERVE
        self.assertEqual(serializer.serialize({'key': 't', 'topk': 3}),
                         ['t', 3])
        self.assertEqual(
            serializer.serialize({'key': 't', 'topk': 3, 'width': 50,
                                  'depth': 4, 'decay': 0.9}),
            ['t', 3, 50, 4, 0.9])

    def testScanAndLoad(self):
        self.assertEqual(
            BloomFilterProtocol.SCAN_DUMP.serialize(
                {'key': 'bf', 'iterator': 0}),
            ['bf', 0])
        self.assertEqual(
            CuckooFilterProtocol.LOAD_CHUNK.serialize(
                {'key': 'cf', 'iterator': 7, 'data': b'\x00\x01'}),
            ['cf', 7, b'\x00\x01'])

    def testSerializeReturnsFreshList(self):
        params = {'key': 'bf', 'items': ['a']}
        first = BloomFilterProtocol.ADD_MULTIPLE.serialize(params)
        first.append('extra')
        self.assertEqual(BloomFilterProtocol.ADD_MULTIPLE.serialize(params),
                         ['bf', 'a'])
        self.assertEqual(params, {'key': 'bf', 'items': ['a']})

    def testSlotNames(self):
        self.assertEqual(BloomFilterProtocol.RESERVE.get_slot_names(),
                         ['key', 'error_rate', 'capacity', 'expansion',
                          'non_scaling'])
        self.assertEqual(CountMinSketchProtocol.MERGE.get_command(),
                         'CMS.MERGE')


class TestReplyDecoder(unittest.TestCase):

    def testStatus(self):
        serializer = BloomFilterProtocol.RESERVE
        self.assertTrue(serializer.deserialize('OK'))
        self.assertTrue(serializer.deserialize(b'OK'))
        self.assertFalse(serializer.deserialize(b'QUEUED'))
        self.assertFalse(serializer.deserialize(None))
        self.assertFalse(serializer.deserialize(1))
        self.assertFalse(serializer.deserialize([b'OK']))

    def testBoolean(self):
        serializer = BloomFilterProtocol.ADD
        self.assertTrue(serializer.deserialize(1))
        self.assertFalse(serializer.deserialize(0))
        self.assertTrue(serializer.deserialize(True))
        self.assertFalse(serializer.deserialize(False))

    def testBooleanMismatch(self):
        try:
            BloomFilterProtocol.ADD.deserialize([1])
            self.fail('Expected ReplyDecodeException')
        except ReplyDecodeException as rde:
            self.assertEqual(rde.get_command(), 'BF.ADD')
            self.assertEqual(rde.get_reply(), [1])
            self.assertTrue(str(rde).startswith('BF.ADD: '))

    def testBooleanArray(self):
        self.assertEqual(
            BloomFilterProtocol.EXISTS_MULTIPLE.deserialize([1, 0, 1]),
            [True, False, True])
        self.assertEqual(BloomFilterProtocol.INSERT.deserialize([]), [])
        self.assertRaises(ReplyDecodeException,
                          BloomFilterProtocol.ADD_MULTIPLE.deserialize, 1)
        self.assertRaises(ReplyDecodeException,
                          BloomFilterProtocol.ADD_MULTIPLE.deserialize,
                          [1, b'x'])

    def testInteger(self):
        self.assertEqual(CuckooFilterProtocol.COUNT.deserialize(3), 3)
        self.assertRaises(ReplyDecodeException,
                          CuckooFilterProtocol.COUNT.deserialize, 1.5)
        self.assertRaises(ReplyDecodeException,
                          CuckooFilterProtocol.COUNT.deserialize, None)
        self.assertRaises(ReplyDecodeException,
                          CuckooFilterProtocol.COUNT.deserialize, b'three')

    def testIntegerArray(self):
        self.assertEqual(CountMinSketchProtocol.QUERY.deserialize([5, 0]),
                         [5, 0])
        self.assertEqual(TopKProtocol.COUNT.deserialize([b'2', 1]), [2, 1])

    def testFirstElement(self):
        self.assertEqual(CountMinSketchProtocol.INCR_BY.deserialize([5]), 5)
        self.assertRaises(ReplyDecodeException,
                          CountMinSketchProtocol.INCR_BY.deserialize, [])
        self.assertRaises(ReplyDecodeException,
                          CountMinSketchProtocol.INCR_BY.deserialize, [5, 6])
        self.assertRaises(ReplyDecodeException,
                          CountMinSketchProtocol.INCR_BY.deserialize, 5)

    def testTopKNullableStrings(self):
        self.assertIsNone(TopKProtocol.INCREMENT_BY.deserialize([None]))
        self.assertEqual(TopKProtocol.INCREMENT_BY.deserialize([b'foo']),
                         'foo')
        self.assertEqual(TopKProtocol.ADD.deserialize([None, b'a', 'b']),
                         [None, 'a', 'b'])
        self.assertEqual(TopKProtocol.LIST.deserialize([]), [])
        self.assertRaises(ReplyDecodeException, TopKProtocol.LIST.deserialize,
                          [b'a', 1])

    def testScanDump(self):
        result = BloomFilterProtocol.SCAN_DUMP.deserialize([1, b'\x00\xff'])
        self.assertEqual(result, ScanDumpResult(1, b'\x00\xff'))
        self.assertEqual(result.get_iterator(), 1)
        self.assertEqual(result.get_data(), b'\x00\xff')
        self.assertFalse(result.is_complete())
        iterator, data = CuckooFilterProtocol.SCAN_DUMP.deserialize([0, None])
        self.assertEqual(iterator, 0)
        self.assertIsNone(data)
        self.assertTrue(ScanDumpResult(iterator, data).is_complete())

    def testScanDumpMismatch(self):
        serializer = BloomFilterProtocol.SCAN_DUMP
        self.assertRaises(ReplyDecodeException, serializer.deserialize, [0])
        self.assertRaises(ReplyDecodeException, serializer.deserialize,
                          [1, b'x', b'y'])
        # A decoded text payload has lost its bytes.
        self.assertRaises(ReplyDecodeException, serializer.deserialize,
                          [1, 'text'])
        self.assertRaises(ReplyDecodeException, serializer.deserialize,
                          b'payload')

    def testElementErrorRaisedAsIs(self):
        error = ResponseError('ERR non scaling filter is full')
        for serializer, reply in (
                (BloomFilterProtocol.ADD_MULTIPLE, [1, error]),
                (CuckooFilterProtocol.INSERT_ADVANCED, [error]),
                (CountMinSketchProtocol.QUERY, [3, error]),
                (TopKProtocol.ADD, [None, error]),
                (BloomFilterProtocol.INFO, [b'Capacity', error])):
            try:
                serializer.deserialize(reply)
                self.fail('Expected ResponseError')
            except ResponseError as re:
                self.assertIs(re, error)

    def testBinaryStrings(self):
        self.assertEqual(
            TopKProtocol.LIST.deserialize([b'\x80abc', b'caf\xc3\xa9']),
            [b'\x80abc', 'caf\u00e9'])
        self.assertEqual(
            TopKProtocol.INCREMENT_BY.deserialize([bytearray(b'\xfe')]),
            b'\xfe')

    def testUnsupportedReplyType(self):
        self.assertRaises(ReplyDecodeException,
                          BloomFilterProtocol.ADD.deserialize, object())

    def testBloomInfo(self):
        reply = [b'Capacity', 100, b'Size', 296, b'Number of filters', 1,
                 b'Number of items inserted', 2, b'Expansion rate', 2]
        info = BloomFilterProtocol.INFO.deserialize(reply)
        self.assertEqual(info.get_capacity(), 100)
        self.assertEqual(info.get_size(), 296)
        self.assertEqual(info.get_number_of_filters(), 1)
        self.assertEqual(info.get_number_of_items_inserted(), 2)
        self.assertEqual(info.get_expansion_rate(), 2)

    def testInfoSkipsUnknownLabels(self):
        reply = [b'Capacity', 100, b'Unknown field', [1, 2, 3], b'Size', 296,
                 b'Another one', b'value', b'Number of filters', 1,
                 b'Number of items inserted', 0, b'Expansion rate', 2,
                 b'Trailing', None]
        expected = (BloomFilterInfo().set_capacity(100).set_size(296)
                    .set_number_of_filters(1).set_number_of_items_inserted(0)
                    .set_expansion_rate(2))
        self.assertEqual(BloomFilterProtocol.INFO.deserialize(reply),
                         expected)

    def testInfoDecodingIsPure(self):
        reply = [b'width', 2000, b'depth', 7, b'count', 12]
        first = CountMinSketchProtocol.INFO.deserialize(reply)
        second = CountMinSketchProtocol.INFO.deserialize(reply)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        self.assertEqual(reply, [b'width', 2000, b'depth', 7, b'count', 12])

    def testInfoMissingFieldsKeepDefaults(self):
        # Non-scaling filters report no expansion rate.
        info = BloomFilterProtocol.INFO.deserialize(
            [b'Capacity', 100, b'Size', 296])
        self.assertEqual(info.get_capacity(), 100)
        self.assertEqual(info.get_number_of_filters(), 0)
        self.assertIsNone(info.get_expansion_rate())
        info = BloomFilterProtocol.INFO.deserialize(
            [b'Capacity', 100, b'Expansion rate', None])
        self.assertIsNone(info.get_expansion_rate())
        self.assertEqual(BloomFilterProtocol.INFO.deserialize([]),
                         BloomFilterInfo())

    def testInfoOddLength(self):
        self.assertRaises(ReplyDecodeException,
                          BloomFilterProtocol.INFO.deserialize,
                          [b'Capacity', 100, b'Size'])

    def testInfoMismatch(self):
        serializer = BloomFilterProtocol.INFO
        self.assertRaises(ReplyDecodeException, serializer.deserialize, 100)
        self.assertRaises(ReplyDecodeException, serializer.deserialize,
                          [100, b'Capacity'])
        self.assertRaises(ReplyDecodeException, serializer.deserialize,
                          [b'Capacity', b'many'])

    def testInfoResp3Map(self):
        reply = {'Capacity': 100, 'Size': 296, 'Number of filters': 1,
                 'Number of items inserted': 0, 'Expansion rate': 2,
                 'Unknown': 'skipped'}
        info = BloomFilterProtocol.INFO.deserialize(reply)
        self.assertEqual(info.get_capacity(), 100)
        self.assertEqual(info.get_expansion_rate(), 2)

    def testCuckooInfo(self):
        reply = [b'Size', 1080, b'Number of buckets', 512,
                 b'Number of filters', 1, b'Number of items inserted', 3,
                 b'Number of items deleted', 1, b'Bucket size', 2,
                 b'Expansion rate', 1, b'Max iterations', 20]
        expected = (CuckooFilterInfo().set_size(1080)
                    .set_number_of_buckets(512).set_number_of_filters(1)
                    .set_number_of_items_inserted(3)
                    .set_number_of_items_deleted(1).set_bucket_size(2)
                    .set_expansion_rate(1).set_max_iterations(20))
        self.assertEqual(CuckooFilterProtocol.INFO.deserialize(reply),
                         expected)

    def testCuckooInfoLabelSpellings(self):
        for label in (b'Max iteration', b'Max iterations', b'MAXITERATIONS'):
            info = CuckooFilterProtocol.INFO.deserialize([label, 30])
            self.assertEqual(info.get_max_iterations(), 30)
        for label in (b'Bucket size', b'Bucket Size'):
            info = CuckooFilterProtocol.INFO.deserialize([label, 4])
            self.assertEqual(info.get_bucket_size(), 4)
        for label in (b'Number of filter', b'Number of filters'):
            info = CuckooFilterProtocol.INFO.deserialize([label, 2])
            self.assertEqual(info.get_number_of_filters(), 2)
        # Matching is exact.
        info = CuckooFilterProtocol.INFO.deserialize([b'max iterations', 30])
        self.assertEqual(info.get_max_iterations(), 0)

    def testCountMinSketchInfo(self):
        info = CountMinSketchProtocol.INFO.deserialize(
            ['width', 2000, 'depth', 7, 'count', 0])
        self.assertEqual(info, CountMinSketchInfo().set_width(2000)
                         .set_depth(7).set_count(0))

    def testTopKInfo(self):
        # Decay arrives as a bulk string.
        info = TopKProtocol.INFO.deserialize(
            [b'k', 3, b'width', 8, b'depth', 7, b'decay', b'0.9'])
        self.assertEqual(info.get_k(), 3)
        self.assertEqual(info.get_width(), 8)
        self.assertEqual(info.get_depth(), 7)
        self.assertAlmostEqual(info.get_decay(), 0.9)
        info = TopKProtocol.INFO.deserialize({b'k': 3, b'decay': 0.5})
        self.assertEqual(info, TopKInfo().set_k(3).set_decay(0.5))
        self.assertRaises(ReplyDecodeException, TopKProtocol.INFO.deserialize,
                          [b'decay', b'fast'])


if __name__ == '__main__':
    unittest.main()
