#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

import unittest
from inspect import isawaitable

from redis.exceptions import ResponseError

from bloomclient import (
    BloomFilterClient, BloomInsertOptions, ClientConfig, CountMinSketchClient,
    CuckooFilterClient, IllegalStateException, ReplyDecodeException,
    TopKClient)
from testutils import AsyncFakeConnection, FakeConnection

# (client class, method, arguments, raw reply)
CALLS = [
    (BloomFilterClient, 'reserve', ('bf', 100, 0.01, 2, True), b'OK'),
    (BloomFilterClient, 'add', ('bf', 'foo'), 1),
    (BloomFilterClient, 'exists_multiple', ('bf', ['foo', 'bar']), [1, 0]),
    (BloomFilterClient, 'insert',
     ('bf', ['a'], BloomInsertOptions().set_capacity(10)), [1]),
    (BloomFilterClient, 'info', ('bf',),
     [b'Capacity', 100, b'Unknown', 1, b'Expansion rate', 2]),
    (BloomFilterClient, 'scan_dump', ('bf', 0), [1, b'\x00']),
    (CuckooFilterClient, 'reserve', ('cf', 1000, 2, 20, 1), b'OK'),
    (CuckooFilterClient, 'count', ('cf', 'foo'), 2),
    (CuckooFilterClient, 'info', ('cf',), [b'Max iteration', 20]),
    (CountMinSketchClient, 'incr_by', ('A', 'foo', 5), [5]),
    (CountMinSketchClient, 'merge', ('C', {'A': 1, 'B': 2}), b'OK'),
    (TopKClient, 'reserve', ('t', 3, 50, 4, 0.9), b'OK'),
    (TopKClient, 'add', ('t', ['a', 'b']), [None, b'a']),
    (TopKClient, 'info', ('t',), [b'k', 3, b'decay', b'0.9']),
]


class TestAsyncChannel(unittest.IsolatedAsyncioTestCase):

    async def testSameArgumentsAndResults(self):
        for handle_class, method, args, reply in CALLS:
            sync_fake = FakeConnection(reply)
            async_fake = AsyncFakeConnection(reply)
            sync_result = getattr(handle_class(sync_fake), method)(*args)
            awaitable = getattr(handle_class(async_fake), method)(*args)
            self.assertTrue(isawaitable(awaitable))
            async_result = await awaitable
            self.assertEqual(async_fake.calls, sync_fake.calls)
            self.assertEqual(async_result, sync_result)

    async def testNothingSentBeforeAwait(self):
        fake = AsyncFakeConnection(1)
        awaitable = BloomFilterClient(fake).add('bf', 'foo')
        self.assertEqual(fake.calls, [])
        self.assertTrue(await awaitable)
        self.assertEqual(fake.calls, [('BF.ADD', 'bf', 'foo')])

    async def testServerErrorPropagates(self):
        error = ResponseError('CMS: key does not exist')
        handle = CountMinSketchClient(AsyncFakeConnection(error))
        with self.assertRaises(ResponseError) as cm:
            await handle.query('missing', ['foo'])
        self.assertIs(cm.exception, error)

    async def testElementErrorPropagates(self):
        error = ResponseError('ERR non scaling filter is full')
        handle = BloomFilterClient(AsyncFakeConnection([error, 1]))
        with self.assertRaises(ResponseError) as cm:
            await handle.add_multiple('bf', ['a', 'b'])
        self.assertIs(cm.exception, error)

    async def testDecodeFailure(self):
        handle = TopKClient(AsyncFakeConnection(5))
        with self.assertRaises(ReplyDecodeException) as cm:
            await handle.list('t')
        self.assertEqual(cm.exception.get_command(), 'TOPK.LIST')

    async def testForcedMode(self):
        config = ClientConfig(FakeConnection(1)).set_async_mode(False)
        self.assertTrue(BloomFilterClient(config).add('bf', 'foo'))
        handle = CuckooFilterClient(ClientConfig(AsyncFakeConnection(0))
                                    .set_async_mode(True))
        self.assertFalse(await handle.exists('cf', 'foo'))

    async def testClosed(self):
        handle = BloomFilterClient(AsyncFakeConnection())
        handle.close()
        self.assertRaises(IllegalStateException, handle.add, 'bf', 'foo')


if __name__ == '__main__':
    unittest.main()
