import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union

ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")
TX_HASH_PATTERN = re.compile(r"^0x[a-fA-F0-9]{64}$")
MAX_BLOCK = 99999999
DEFAULT_OFFSET = 10000


class Sort(Enum):
    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        return self.value


class Tag(Enum):
    """Block parameter accepted by the balance endpoints."""

    EARLIEST = "earliest"
    PENDING = "pending"
    LATEST = "latest"

    def __str__(self) -> str:
        return self.value


class BlockType(Enum):
    """Which kind of mined block the getminedblocks endpoint lists."""

    CANONICAL_BLOCKS = "blocks"
    UNCLES = "uncles"

    def __str__(self) -> str:
        return self.value


def normalize_address(address: str) -> str:
    if not isinstance(address, str):
        raise ValueError("Address must be a string.")

    candidate = address.strip()
    if not candidate.startswith("0x"):
        candidate = f"0x{candidate}"

    if not ADDRESS_PATTERN.match(candidate):
        raise ValueError("Invalid address format. Expected 0x-prefixed 40 hex characters.")

    return candidate.lower()


def normalize_tx_hash(tx_hash: str) -> str:
    if not isinstance(tx_hash, str):
        raise ValueError("tx_hash must be a string.")

    candidate = tx_hash.strip()
    if not candidate.startswith("0x"):
        candidate = f"0x{candidate}"

    if not TX_HASH_PATTERN.match(candidate):
        raise ValueError("tx_hash must be 0x-prefixed 64 hex characters.")

    return candidate.lower()


@dataclass(frozen=True)
class TxListParams:
    """Pagination and ordering shared by the transaction and event list endpoints."""

    start_block: int = 0
    end_block: int = MAX_BLOCK
    page: int = 0
    offset: int = DEFAULT_OFFSET
    sort: Sort = Sort.ASC

    def __post_init__(self) -> None:
        for field in ("start_block", "end_block", "page", "offset"):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{field} must be a non-negative integer.")
        if not isinstance(self.sort, Sort):
            raise ValueError("sort must be Sort.ASC or Sort.DESC.")

    def to_params(self) -> Dict[str, str]:
        return {
            "startBlock": str(self.start_block),
            "endBlock": str(self.end_block),
            "page": str(self.page),
            "offset": str(self.offset),
            "sort": str(self.sort),
        }


# Internal transaction filters


@dataclass(frozen=True)
class InternalTxByAddress:
    address: str

    def params(self) -> Dict[str, str]:
        return {"address": normalize_address(self.address)}


@dataclass(frozen=True)
class InternalTxByHash:
    tx_hash: str

    def params(self) -> Dict[str, str]:
        return {"txhash": normalize_tx_hash(self.tx_hash)}


@dataclass(frozen=True)
class InternalTxByBlockRange:
    """No filter key: the block range in TxListParams selects the rows."""

    def params(self) -> Dict[str, str]:
        return {}


InternalTxQuery = Union[InternalTxByAddress, InternalTxByHash, InternalTxByBlockRange]


# Token transfer filters


@dataclass(frozen=True)
class TokenByAddress:
    address: str

    def params(self) -> Dict[str, str]:
        return {"address": normalize_address(self.address)}


@dataclass(frozen=True)
class TokenByContract:
    contract: str

    def params(self) -> Dict[str, str]:
        return {"contractaddress": normalize_address(self.contract)}


@dataclass(frozen=True)
class TokenByAddressAndContract:
    address: str
    contract: str

    def params(self) -> Dict[str, str]:
        return {
            "address": normalize_address(self.address),
            "contractaddress": normalize_address(self.contract),
        }


TokenQuery = Union[TokenByAddress, TokenByContract, TokenByAddressAndContract]


def build_list_params(
    list_params: Optional[TxListParams] = None,
    option: Optional[Union[InternalTxQuery, TokenQuery]] = None,
) -> Dict[str, str]:
    """Layer a filter variant's keys on top of the pagination/sort keys."""
    params = (list_params or TxListParams()).to_params()
    if option is not None:
        params.update(option.params())
    return params


def build_balance_params(address: str, tag: Optional[Tag] = None) -> Dict[str, str]:
    return {"address": normalize_address(address), "tag": str(tag or Tag.LATEST)}


def build_balance_multi_params(addresses: Sequence[str], tag: Optional[Tag] = None) -> Dict[str, str]:
    if not addresses:
        raise ValueError("At least one address is required.")
    joined = ",".join(normalize_address(address) for address in addresses)
    return {"address": joined, "tag": str(tag or Tag.LATEST)}


def build_mined_blocks_params(
    address: str,
    block_type: Optional[BlockType] = None,
    page_and_offset: Optional[Tuple[int, int]] = None,
) -> Dict[str, str]:
    params = {
        "address": normalize_address(address),
        "blocktype": str(block_type or BlockType.CANONICAL_BLOCKS),
    }
    if page_and_offset is not None:
        page, offset = page_and_offset
        params["page"] = str(page)
        params["offset"] = str(offset)
    return params


def make_tx_list_params(
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> TxListParams:
    """Build TxListParams from loosely-typed caller input, keeping defaults for omitted values."""
    defaults = TxListParams()
    normalized_sort = (sort or defaults.sort.value).strip().lower()
    if normalized_sort not in ("asc", "desc"):
        raise ValueError("sort must be 'asc' or 'desc'.")
    params = TxListParams(
        start_block=defaults.start_block if start_block is None else start_block,
        end_block=defaults.end_block if end_block is None else end_block,
        page=defaults.page if page is None else page,
        offset=defaults.offset if offset is None else offset,
        sort=Sort(normalized_sort),
    )
    if params.start_block > params.end_block:
        raise ValueError("start_block cannot be greater than end_block.")
    return params


def make_internal_tx_query(
    address: Optional[str] = None, tx_hash: Optional[str] = None
) -> InternalTxQuery:
    if address and tx_hash:
        raise ValueError("Provide either address or tx_hash, not both.")
    if address:
        return InternalTxByAddress(address)
    if tx_hash:
        return InternalTxByHash(tx_hash)
    return InternalTxByBlockRange()


def make_token_query(address: Optional[str] = None, contract: Optional[str] = None) -> TokenQuery:
    if address and contract:
        return TokenByAddressAndContract(address, contract)
    if address:
        return TokenByAddress(address)
    if contract:
        return TokenByContract(contract)
    raise ValueError("Either address or contract is required.")
