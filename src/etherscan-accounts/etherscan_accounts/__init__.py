"""Typed client for the Etherscan account endpoints."""

from .errors import (
    BadStatusCode,
    BalanceFailed,
    DecodeError,
    EtherscanError,
    MalformedEmbeddedJson,
    MalformedEnvelope,
    MalformedHex,
    MalformedNumeric,
    MalformedRecord,
)
from .genesis import GenesisOption
from .query import (
    BlockType,
    InternalTxByAddress,
    InternalTxByBlockRange,
    InternalTxByHash,
    Sort,
    Tag,
    TokenByAddress,
    TokenByAddressAndContract,
    TokenByContract,
    TxListParams,
)
from .records import (
    AccountBalance,
    ERC20TokenTransferEvent,
    ERC721TokenTransferEvent,
    ERC1155TokenTransferEvent,
    InternalTransaction,
    MinedBlock,
    NormalTransaction,
)
from .service import AccountService

__version__ = "0.1.0"
