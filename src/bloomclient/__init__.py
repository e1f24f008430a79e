#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#

from . import extensions
from .bloom import BloomFilterClient
from .commands import (
    BloomFilterCommand, CountMinSketchCommand, CuckooFilterCommand,
    TopKCommand)
from .config import ClientConfig
from .countmin import CountMinSketchClient
from .cuckoo import CuckooFilterClient
from .exception import (
    BloomClientException, IllegalArgumentException, IllegalStateException,
    ReplyDecodeException)
from .operations import (
    BloomFilterInfo, BloomInsertOptions, CountMinSketchInfo, CuckooFilterInfo,
    CuckooInsertOptions, ScanDumpResult, TopKInfo)
from .topk import TopKClient
from .version import __version__

__all__ = ['BloomClientException',
           'BloomFilterClient',
           'BloomFilterCommand',
           'BloomFilterInfo',
           'BloomInsertOptions',
           'ClientConfig',
           'CountMinSketchClient',
           'CountMinSketchCommand',
           'CountMinSketchInfo',
           'CuckooFilterClient',
           'CuckooFilterCommand',
           'CuckooFilterInfo',
           'CuckooInsertOptions',
           'IllegalArgumentException',
           'IllegalStateException',
           'ReplyDecodeException',
           'ScanDumpResult',
           'TopKClient',
           'TopKCommand',
           'TopKInfo',
           'extensions']
