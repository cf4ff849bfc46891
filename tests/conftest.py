from typing import Any, Dict, List, Mapping, Tuple

import pytest

ADDRESS_A = "0x" + "9a" * 20
ADDRESS_B = "0x" + "c5" * 20
CONTRACT = "0x" + "06" * 20
HASH_A = "0x" + "7e" * 32
HASH_B = "0x" + "16" * 32


class FakeTransport:
    """Records every perform() call and answers with queued payloads."""

    def __init__(self, *payloads: Any) -> None:
        self.payloads = list(payloads)
        self.calls: List[Tuple[str, str, Dict[str, str]]] = []

    def perform(self, module: str, action: str, params: Mapping[str, str]) -> Any:
        self.calls.append((module, action, dict(params)))
        return self.payloads.pop(0)


@pytest.fixture
def normal_tx_row() -> Dict[str, str]:
    return {
        "blockNumber": "14923678",
        "timeStamp": "1654646411",
        "hash": HASH_A,
        "nonce": "1",
        "blockHash": HASH_B,
        "transactionIndex": "61",
        "from": ADDRESS_A,
        "to": "",
        "value": "0",
        "gas": "6000000",
        "gasPrice": "83924748773",
        "isError": "0",
        "txreceipt_status": "1",
        "input": "0x60806040",
        "contractAddress": ADDRESS_B,
        "cumulativeGasUsed": "10450178",
        "gasUsed": "4457269",
        "confirmations": "122485",
        "methodId": "0x60806040",
        "functionName": "",
    }


@pytest.fixture
def genesis_tx_row() -> Dict[str, str]:
    return {
        "blockNumber": "0",
        "timeStamp": "1438269973",
        "hash": "GENESIS_ddbd2b932c763ba5b1b7ae3b362eac3e8d40121a",
        "nonce": "",
        "blockHash": "",
        "transactionIndex": "0",
        "from": "GENESIS",
        "to": ADDRESS_A,
        "value": "10000000000000000000000",
        "gas": "0",
        "gasPrice": "0",
        "isError": "0",
        "txreceipt_status": "1",
        "input": "",
        "contractAddress": "",
        "cumulativeGasUsed": "0",
        "gasUsed": "0",
        "confirmations": "20000000",
        "methodId": "0x",
        "functionName": "",
    }


@pytest.fixture
def internal_tx_row() -> Dict[str, str]:
    return {
        "blockNumber": "2535479",
        "timeStamp": "1477837690",
        "hash": HASH_A,
        "from": ADDRESS_A,
        "to": "",
        "value": "0",
        "contractAddress": ADDRESS_B,
        "input": "",
        "type": "create",
        "gas": "254791",
        "gasUsed": "46750",
        "traceId": "0",
        "isError": "0",
        "errCode": "",
    }


def _token_row() -> Dict[str, str]:
    return {
        "blockNumber": "4730207",
        "timeStamp": "1513240363",
        "hash": HASH_A,
        "nonce": "155",
        "blockHash": HASH_B,
        "from": ADDRESS_A,
        "contractAddress": CONTRACT,
        "to": ADDRESS_B,
        "transactionIndex": "55",
        "gas": "1700000",
        "gasPrice": "40000000000",
        "gasUsed": "1000000",
        "cumulativeGasUsed": "2020012",
        "input": "deprecated",
        "confirmations": "7050000",
    }


@pytest.fixture
def erc20_row() -> Dict[str, str]:
    row = _token_row()
    row.update(
        {
            "value": "5901522149285533025181",
            "tokenName": "Maker",
            "tokenSymbol": "MKR",
            "tokenDecimal": "18",
        }
    )
    return row


@pytest.fixture
def erc721_row() -> Dict[str, str]:
    row = _token_row()
    row.update(
        {
            "tokenID": "202106",
            "tokenName": "CryptoKitties",
            "tokenSymbol": "CK",
            "tokenDecimal": "0",
        }
    )
    return row


@pytest.fixture
def erc1155_row() -> Dict[str, str]:
    row = _token_row()
    row.update(
        {
            "tokenID": "10371",
            "tokenValue": "1",
            "tokenName": "",
            "tokenSymbol": "",
        }
    )
    return row


@pytest.fixture
def mined_block_row() -> Dict[str, str]:
    return {
        "blockNumber": "3462296",
        "timeStamp": "1491118514",
        "blockReward": "5194770940000000000",
    }
