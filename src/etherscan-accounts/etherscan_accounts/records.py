"""
Record schemas for the account endpoints.

Each ``from_json`` decodes its fields one by one, in declaration order, so the
first malformed field is the one reported. Nothing falls back to a default:
a field is either valid per its codec or the whole record fails.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .codecs import (
    ADDRESS,
    HASH,
    QUANTITY,
    TEXT,
    U64_BITS,
    decode_address,
    decode_block_number,
    decode_bytes,
    decode_hash,
    decode_hex,
    decode_json_string,
    decode_numeric,
    decode_numeric_opt,
    encode_hex,
    encode_json_string,
    encode_numeric,
)
from .errors import MalformedRecord
from .genesis import GenesisOption, decode_genesis, encode_genesis

METHOD_ID_SIZE = 4


def _object(obj: Any, record: str) -> Dict[str, Any]:
    if not isinstance(obj, dict):
        raise MalformedRecord(record, obj, "expected a JSON object")
    return obj


def _wire(obj: Dict[str, Any], key: str) -> str:
    if key not in obj:
        raise MalformedRecord(key, None, "missing field")
    raw = obj[key]
    if not isinstance(raw, str):
        raise MalformedRecord(key, raw, "expected a JSON string")
    return raw


def _genesis_address(raw: str, field: str) -> Optional[str]:
    return decode_json_string(raw, field, ADDRESS)


def _genesis_hash(raw: str, field: str) -> Optional[str]:
    return decode_json_string(raw, field, HASH)


@dataclass(frozen=True)
class AccountBalance:
    account: str
    balance: int

    @classmethod
    def from_json(cls, obj: Any) -> "AccountBalance":
        obj = _object(obj, "AccountBalance")
        return cls(
            account=decode_address(_wire(obj, "account"), "account"),
            balance=decode_numeric(_wire(obj, "balance"), "balance"),
        )

    def to_json(self) -> Dict[str, str]:
        return {"account": self.account, "balance": encode_numeric(self.balance)}


@dataclass(frozen=True)
class NormalTransaction:
    is_error: str
    block_number: int
    time_stamp: str
    hash: GenesisOption[str]
    nonce: Optional[int]
    block_hash: Optional[str]
    transaction_index: Optional[int]
    from_: GenesisOption[str]
    to: Optional[str]
    value: int
    gas: int
    gas_price: Optional[int]
    tx_receipt_status: str
    input: bytes
    contract_address: Optional[str]
    gas_used: int
    cumulative_gas_used: int
    confirmations: int
    method_id: Optional[bytes]
    function_name: Optional[str]

    @classmethod
    def from_json(cls, obj: Any) -> "NormalTransaction":
        obj = _object(obj, "NormalTransaction")
        return cls(
            is_error=_wire(obj, "isError"),
            block_number=decode_block_number(_wire(obj, "blockNumber"), "blockNumber"),
            time_stamp=_wire(obj, "timeStamp"),
            hash=decode_genesis(_wire(obj, "hash"), "hash", _genesis_hash),
            nonce=decode_json_string(_wire(obj, "nonce"), "nonce", QUANTITY),
            block_hash=decode_json_string(_wire(obj, "blockHash"), "blockHash", HASH),
            transaction_index=decode_numeric_opt(
                _wire(obj, "transactionIndex"), "transactionIndex", U64_BITS
            ),
            from_=decode_genesis(_wire(obj, "from"), "from", _genesis_address),
            to=decode_json_string(_wire(obj, "to"), "to", ADDRESS),
            value=decode_numeric(_wire(obj, "value"), "value"),
            gas=decode_numeric(_wire(obj, "gas"), "gas"),
            gas_price=decode_numeric_opt(_wire(obj, "gasPrice"), "gasPrice"),
            tx_receipt_status=_wire(obj, "txreceipt_status"),
            input=decode_bytes(_wire(obj, "input"), "input"),
            contract_address=decode_json_string(
                _wire(obj, "contractAddress"), "contractAddress", ADDRESS
            ),
            gas_used=decode_numeric(_wire(obj, "gasUsed"), "gasUsed"),
            cumulative_gas_used=decode_numeric(
                _wire(obj, "cumulativeGasUsed"), "cumulativeGasUsed"
            ),
            confirmations=decode_numeric(_wire(obj, "confirmations"), "confirmations", U64_BITS),
            method_id=decode_hex(_wire(obj, "methodId"), "methodId", METHOD_ID_SIZE),
            function_name=decode_json_string(_wire(obj, "functionName"), "functionName", TEXT),
        )

    def to_json(self) -> Dict[str, str]:
        return {
            "isError": self.is_error,
            "blockNumber": encode_numeric(self.block_number),
            "timeStamp": self.time_stamp,
            "hash": encode_genesis(self.hash, str),
            "nonce": encode_json_string(self.nonce, QUANTITY),
            "blockHash": encode_json_string(self.block_hash, HASH),
            "transactionIndex": encode_numeric(self.transaction_index),
            "from": encode_genesis(self.from_, str),
            "to": encode_json_string(self.to, ADDRESS),
            "value": encode_numeric(self.value),
            "gas": encode_numeric(self.gas),
            "gasPrice": encode_numeric(self.gas_price),
            "txreceipt_status": self.tx_receipt_status,
            "input": encode_hex(self.input),
            "contractAddress": encode_json_string(self.contract_address, ADDRESS),
            "gasUsed": encode_numeric(self.gas_used),
            "cumulativeGasUsed": encode_numeric(self.cumulative_gas_used),
            "confirmations": encode_numeric(self.confirmations),
            "methodId": encode_hex(self.method_id),
            "functionName": encode_json_string(self.function_name, TEXT),
        }


@dataclass(frozen=True)
class InternalTransaction:
    block_number: int
    time_stamp: str
    hash: str
    from_: str
    to: GenesisOption[str]
    value: int
    contract_address: GenesisOption[str]
    input: GenesisOption[bytes]
    result_type: str
    gas: int
    gas_used: int
    trace_id: str
    is_error: str
    err_code: str

    @classmethod
    def from_json(cls, obj: Any) -> "InternalTransaction":
        obj = _object(obj, "InternalTransaction")
        return cls(
            block_number=decode_block_number(_wire(obj, "blockNumber"), "blockNumber"),
            time_stamp=_wire(obj, "timeStamp"),
            hash=decode_hash(_wire(obj, "hash"), "hash"),
            from_=decode_address(_wire(obj, "from"), "from"),
            to=decode_genesis(_wire(obj, "to"), "to", _genesis_address),
            value=decode_numeric(_wire(obj, "value"), "value"),
            contract_address=decode_genesis(
                _wire(obj, "contractAddress"), "contractAddress", _genesis_address
            ),
            input=decode_genesis(_wire(obj, "input"), "input", decode_bytes),
            result_type=_wire(obj, "type"),
            gas=decode_numeric(_wire(obj, "gas"), "gas"),
            gas_used=decode_numeric(_wire(obj, "gasUsed"), "gasUsed"),
            trace_id=_wire(obj, "traceId"),
            is_error=_wire(obj, "isError"),
            err_code=_wire(obj, "errCode"),
        )

    def to_json(self) -> Dict[str, str]:
        return {
            "blockNumber": encode_numeric(self.block_number),
            "timeStamp": self.time_stamp,
            "hash": self.hash,
            "from": self.from_,
            "to": encode_genesis(self.to, str),
            "value": encode_numeric(self.value),
            "contractAddress": encode_genesis(self.contract_address, str),
            "input": encode_genesis(self.input, encode_hex),
            "type": self.result_type,
            "gas": encode_numeric(self.gas),
            "gasUsed": encode_numeric(self.gas_used),
            "traceId": self.trace_id,
            "isError": self.is_error,
            "errCode": self.err_code,
        }


# Token transfer events share a leading block of transaction fields and a
# trailing block of receipt fields; only the token-specific middle differs.


def _token_head(obj: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "block_number": decode_block_number(_wire(obj, "blockNumber"), "blockNumber"),
        "time_stamp": _wire(obj, "timeStamp"),
        "hash": decode_hash(_wire(obj, "hash"), "hash"),
        "nonce": decode_numeric(_wire(obj, "nonce"), "nonce"),
        "block_hash": decode_hash(_wire(obj, "blockHash"), "blockHash"),
        "from_": decode_address(_wire(obj, "from"), "from"),
        "contract_address": decode_address(_wire(obj, "contractAddress"), "contractAddress"),
        "to": decode_json_string(_wire(obj, "to"), "to", ADDRESS),
    }


def _token_tail(obj: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "transaction_index": decode_numeric(
            _wire(obj, "transactionIndex"), "transactionIndex", U64_BITS
        ),
        "gas": decode_numeric(_wire(obj, "gas"), "gas"),
        "gas_price": decode_numeric_opt(_wire(obj, "gasPrice"), "gasPrice"),
        "gas_used": decode_numeric(_wire(obj, "gasUsed"), "gasUsed"),
        "cumulative_gas_used": decode_numeric(_wire(obj, "cumulativeGasUsed"), "cumulativeGasUsed"),
        "input": _wire(obj, "input"),
        "confirmations": decode_numeric(_wire(obj, "confirmations"), "confirmations", U64_BITS),
    }


def _token_head_json(event: Any) -> Dict[str, str]:
    return {
        "blockNumber": encode_numeric(event.block_number),
        "timeStamp": event.time_stamp,
        "hash": event.hash,
        "nonce": encode_numeric(event.nonce),
        "blockHash": event.block_hash,
        "from": event.from_,
        "contractAddress": event.contract_address,
        "to": encode_json_string(event.to, ADDRESS),
    }


def _token_tail_json(event: Any) -> Dict[str, str]:
    return {
        "transactionIndex": encode_numeric(event.transaction_index),
        "gas": encode_numeric(event.gas),
        "gasPrice": encode_numeric(event.gas_price),
        "gasUsed": encode_numeric(event.gas_used),
        "cumulativeGasUsed": encode_numeric(event.cumulative_gas_used),
        "input": event.input,
        "confirmations": encode_numeric(event.confirmations),
    }


@dataclass(frozen=True)
class ERC20TokenTransferEvent:
    block_number: int
    time_stamp: str
    hash: str
    nonce: int
    block_hash: str
    from_: str
    contract_address: str
    to: Optional[str]
    value: int
    token_name: str
    token_symbol: str
    token_decimal: str
    transaction_index: int
    gas: int
    gas_price: Optional[int]
    gas_used: int
    cumulative_gas_used: int
    input: str  # deprecated by the API, always "deprecated"
    confirmations: int

    @classmethod
    def from_json(cls, obj: Any) -> "ERC20TokenTransferEvent":
        obj = _object(obj, "ERC20TokenTransferEvent")
        return cls(
            **_token_head(obj),
            value=decode_numeric(_wire(obj, "value"), "value"),
            token_name=_wire(obj, "tokenName"),
            token_symbol=_wire(obj, "tokenSymbol"),
            token_decimal=_wire(obj, "tokenDecimal"),
            **_token_tail(obj),
        )

    def to_json(self) -> Dict[str, str]:
        return {
            **_token_head_json(self),
            "value": encode_numeric(self.value),
            "tokenName": self.token_name,
            "tokenSymbol": self.token_symbol,
            "tokenDecimal": self.token_decimal,
            **_token_tail_json(self),
        }


@dataclass(frozen=True)
class ERC721TokenTransferEvent:
    block_number: int
    time_stamp: str
    hash: str
    nonce: int
    block_hash: str
    from_: str
    contract_address: str
    to: Optional[str]
    token_id: str
    token_name: str
    token_symbol: str
    token_decimal: str
    transaction_index: int
    gas: int
    gas_price: Optional[int]
    gas_used: int
    cumulative_gas_used: int
    input: str
    confirmations: int

    @classmethod
    def from_json(cls, obj: Any) -> "ERC721TokenTransferEvent":
        obj = _object(obj, "ERC721TokenTransferEvent")
        return cls(
            **_token_head(obj),
            token_id=_wire(obj, "tokenID"),
            token_name=_wire(obj, "tokenName"),
            token_symbol=_wire(obj, "tokenSymbol"),
            token_decimal=_wire(obj, "tokenDecimal"),
            **_token_tail(obj),
        )

    def to_json(self) -> Dict[str, str]:
        return {
            **_token_head_json(self),
            "tokenID": self.token_id,
            "tokenName": self.token_name,
            "tokenSymbol": self.token_symbol,
            "tokenDecimal": self.token_decimal,
            **_token_tail_json(self),
        }


@dataclass(frozen=True)
class ERC1155TokenTransferEvent:
    block_number: int
    time_stamp: str
    hash: str
    nonce: int
    block_hash: str
    from_: str
    contract_address: str
    to: Optional[str]
    token_id: str
    token_value: str
    token_name: str
    token_symbol: str
    transaction_index: int
    gas: int
    gas_price: Optional[int]
    gas_used: int
    cumulative_gas_used: int
    input: str
    confirmations: int

    @classmethod
    def from_json(cls, obj: Any) -> "ERC1155TokenTransferEvent":
        obj = _object(obj, "ERC1155TokenTransferEvent")
        return cls(
            **_token_head(obj),
            token_id=_wire(obj, "tokenID"),
            token_value=_wire(obj, "tokenValue"),
            token_name=_wire(obj, "tokenName"),
            token_symbol=_wire(obj, "tokenSymbol"),
            **_token_tail(obj),
        )

    def to_json(self) -> Dict[str, str]:
        return {
            **_token_head_json(self),
            "tokenID": self.token_id,
            "tokenValue": self.token_value,
            "tokenName": self.token_name,
            "tokenSymbol": self.token_symbol,
            **_token_tail_json(self),
        }


@dataclass(frozen=True)
class MinedBlock:
    block_number: int
    time_stamp: str
    block_reward: int

    @classmethod
    def from_json(cls, obj: Any) -> "MinedBlock":
        obj = _object(obj, "MinedBlock")
        return cls(
            block_number=decode_block_number(_wire(obj, "blockNumber"), "blockNumber"),
            time_stamp=_wire(obj, "timeStamp"),
            block_reward=decode_numeric(_wire(obj, "blockReward"), "blockReward"),
        )

    def to_json(self) -> Dict[str, str]:
        return {
            "blockNumber": encode_numeric(self.block_number),
            "timeStamp": self.time_stamp,
            "blockReward": encode_numeric(self.block_reward),
        }
