#
# Copyright (c) 2025 The bloomclient Authors. All rights reserved.
#
# Licensed under the Universal Permissive License v 1.0 as shown at
#  https://oss.oracle.com/licenses/upl/
#


class BloomFilterCommand:
    """
    Command keywords of the Bloom filter family.
    """
    RESERVE = 'BF.RESERVE'
    ADD = 'BF.ADD'
    ADD_MULTIPLE = 'BF.MADD'
    EXISTS = 'BF.EXISTS'
    EXISTS_MULTIPLE = 'BF.MEXISTS'
    INSERT = 'BF.INSERT'
    INFO = 'BF.INFO'
    SCAN_DUMP = 'BF.SCANDUMP'
    LOAD_CHUNK = 'BF.LOADCHUNK'


class CuckooFilterCommand:
    """
    Command keywords of the Cuckoo filter family.
    """
    RESERVE = 'CF.RESERVE'
    ADD = 'CF.ADD'
    ADD_ADVANCED = 'CF.ADDNX'
    INSERT = 'CF.INSERT'
    INSERT_ADVANCED = 'CF.INSERTNX'
    EXISTS = 'CF.EXISTS'
    DELETE = 'CF.DEL'
    COUNT = 'CF.COUNT'
    SCAN_DUMP = 'CF.SCANDUMP'
    LOAD_CHUNK = 'CF.LOADCHUNK'
    INFO = 'CF.INFO'


class CountMinSketchCommand:
    """
    Command keywords of the Count-Min Sketch family.
    """
    INIT_BY_DIM = 'CMS.INITBYDIM'
    INIT_BY_PROB = 'CMS.INITBYPROB'
    INCR_BY = 'CMS.INCRBY'
    QUERY = 'CMS.QUERY'
    MERGE = 'CMS.MERGE'
    INFO = 'CMS.INFO'


class TopKCommand:
    """
    Command keywords of the Top-K family.
    """
    RESERVE = 'TOPK.RESERVE'
    ADD = 'TOPK.ADD'
    INCREMENT_BY = 'TOPK.INCRBY'
    QUERY = 'TOPK.QUERY'
    COUNT = 'TOPK.COUNT'
    LIST = 'TOPK.LIST'
    INFO = 'TOPK.INFO'
