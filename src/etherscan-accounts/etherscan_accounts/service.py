import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, TypeVar

from .client import EtherscanClient
from .codecs import decode_numeric
from .config import Config
from .envelope import Envelope, StatusPolicy
from .errors import MalformedEnvelope
from .query import (
    BlockType,
    InternalTxQuery,
    Tag,
    TokenQuery,
    TxListParams,
    build_balance_multi_params,
    build_balance_params,
    build_list_params,
    build_mined_blocks_params,
    normalize_address,
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

logger = logging.getLogger(__name__)

MODULE_ACCOUNT = "account"

R = TypeVar("R")


class Transport(Protocol):
    def perform(self, module: str, action: str, params: Mapping[str, str]) -> Any:
        ...


class AccountService:
    """Typed access to the account module endpoints."""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    @classmethod
    def from_config(cls, config: Config) -> "AccountService":
        client = EtherscanClient(
            api_key=config.api_key,
            base_url=config.base_url,
            chain_id=config.chain_id,
            timeout=config.request_timeout,
            max_retries=config.max_retries,
            backoff_seconds=config.backoff_seconds,
        )
        return cls(client)

    def get_ether_balance_single(self, address: str, tag: Optional[Tag] = None) -> AccountBalance:
        params = build_balance_params(address, tag)
        result = self._call("balance", params, StatusPolicy.AUTHORITATIVE)
        return AccountBalance(
            account=params["address"],
            balance=decode_numeric(result, "result"),
        )

    def get_ether_balance_multi(
        self, addresses: Sequence[str], tag: Optional[Tag] = None
    ) -> List[AccountBalance]:
        params = build_balance_multi_params(addresses, tag)
        result = self._call("balancemulti", params, StatusPolicy.AUTHORITATIVE)
        return self._decode_rows(result, AccountBalance.from_json)

    def get_transactions(
        self, address: str, params: Optional[TxListParams] = None
    ) -> List[NormalTransaction]:
        query = build_list_params(params)
        query["address"] = normalize_address(address)
        result = self._call("txlist", query, StatusPolicy.ADVISORY)
        return self._decode_rows(result, NormalTransaction.from_json)

    def get_internal_transactions(
        self, option: InternalTxQuery, params: Optional[TxListParams] = None
    ) -> List[InternalTransaction]:
        query = build_list_params(params, option)
        result = self._call("txlistinternal", query, StatusPolicy.ADVISORY)
        return self._decode_rows(result, InternalTransaction.from_json)

    def get_erc20_token_transfer_events(
        self, option: TokenQuery, params: Optional[TxListParams] = None
    ) -> List[ERC20TokenTransferEvent]:
        query = build_list_params(params, option)
        result = self._call("tokentx", query, StatusPolicy.ADVISORY)
        return self._decode_rows(result, ERC20TokenTransferEvent.from_json)

    def get_erc721_token_transfer_events(
        self, option: TokenQuery, params: Optional[TxListParams] = None
    ) -> List[ERC721TokenTransferEvent]:
        query = build_list_params(params, option)
        result = self._call("tokennfttx", query, StatusPolicy.ADVISORY)
        return self._decode_rows(result, ERC721TokenTransferEvent.from_json)

    def get_erc1155_token_transfer_events(
        self, option: TokenQuery, params: Optional[TxListParams] = None
    ) -> List[ERC1155TokenTransferEvent]:
        query = build_list_params(params, option)
        result = self._call("token1155tx", query, StatusPolicy.ADVISORY)
        return self._decode_rows(result, ERC1155TokenTransferEvent.from_json)

    def get_mined_blocks(
        self,
        address: str,
        block_type: Optional[BlockType] = None,
        page_and_offset: Optional[Tuple[int, int]] = None,
    ) -> List[MinedBlock]:
        params = build_mined_blocks_params(address, block_type, page_and_offset)
        result = self._call("getminedblocks", params, StatusPolicy.ADVISORY)
        return self._decode_rows(result, MinedBlock.from_json)

    def _call(self, action: str, params: Dict[str, str], policy: StatusPolicy) -> Any:
        payload = self.transport.perform(MODULE_ACCOUNT, action, params)
        envelope = Envelope.from_payload(payload)
        return envelope.interpret(policy)

    def _decode_rows(self, rows: Any, decode: Callable[[Any], R]) -> List[R]:
        if not isinstance(rows, list):
            raise MalformedEnvelope("result is not a list")
        records = [decode(row) for row in rows]
        logger.debug("Decoded %d rows", len(records))
        return records
