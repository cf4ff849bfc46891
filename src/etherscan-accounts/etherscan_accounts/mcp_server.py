"""
MCP server exposing the Etherscan account endpoints as decoded records.
"""

import argparse
import logging
from dataclasses import replace
from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from .config import Config, load_config, resolve_chain_id
from .query import BlockType, Tag, make_internal_tx_query, make_token_query, make_tx_list_params
from .service import AccountService

server = FastMCP(
    name="etherscan-accounts",
    instructions="Balances, transaction lists, token transfers and mined blocks via Etherscan API V2.",
)

_config: Optional[Config] = None
_services: Dict[str, AccountService] = {}


def _get_service(network: Optional[str] = None) -> AccountService:
    """Return the service for ``network``, one per chain id."""
    global _config
    if _config is None:
        _config = load_config()
        logging.basicConfig(level=_config.log_level)

    config = _config
    if network:
        config = replace(_config, network=network.lower(), chain_id=resolve_chain_id(network))

    if config.chain_id not in _services:
        _services[config.chain_id] = AccountService.from_config(config)
    return _services[config.chain_id]


@server.tool(
    name="get_balance",
    title="Get Ether Balance",
    description="Ether balance (wei) of one address. tag: latest|pending|earliest (default latest).",
)
def get_balance(address: str, network: Optional[str] = None, tag: Optional[str] = None) -> dict:
    svc = _get_service(network)
    return svc.get_ether_balance_single(address, Tag(tag) if tag else None).to_json()


@server.tool(
    name="get_balances",
    title="Get Ether Balances",
    description="Ether balances (wei) of several addresses. `addresses` must be an array.",
)
def get_balances(
    addresses: List[str], network: Optional[str] = None, tag: Optional[str] = None
) -> dict:
    svc = _get_service(network)
    balances = svc.get_ether_balance_multi(addresses, Tag(tag) if tag else None)
    return {"balances": [item.to_json() for item in balances]}


@server.tool(
    name="list_transactions",
    title="List Transactions",
    description="List normal transactions for an address with optional block range and pagination.",
)
def list_transactions(
    address: str,
    network: Optional[str] = None,
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> dict:
    svc = _get_service(network)
    params = make_tx_list_params(start_block, end_block, page, offset, sort)
    records = svc.get_transactions(address, params)
    return {"transactions": [record.to_json() for record in records]}


@server.tool(
    name="list_internal_transactions",
    title="List Internal Transactions",
    description="List internal transactions by address, by tx hash, or (neither given) by block range only.",
)
def list_internal_transactions(
    address: Optional[str] = None,
    tx_hash: Optional[str] = None,
    network: Optional[str] = None,
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> dict:
    svc = _get_service(network)
    option = make_internal_tx_query(address, tx_hash)
    params = make_tx_list_params(start_block, end_block, page, offset, sort)
    records = svc.get_internal_transactions(option, params)
    return {"transactions": [record.to_json() for record in records]}


@server.tool(
    name="list_token_transfers",
    title="List Token Transfers",
    description="List token transfers (erc20/erc721/erc1155) by address, token contract, or both.",
)
def list_token_transfers(
    address: Optional[str] = None,
    contract: Optional[str] = None,
    network: Optional[str] = None,
    token_type: str = "erc20",
    start_block: Optional[int] = None,
    end_block: Optional[int] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
    sort: Optional[str] = None,
) -> dict:
    svc = _get_service(network)
    option = make_token_query(address, contract)
    params = make_tx_list_params(start_block, end_block, page, offset, sort)
    normalized = (token_type or "erc20").lower()
    if normalized == "erc20":
        records = svc.get_erc20_token_transfer_events(option, params)
    elif normalized == "erc721":
        records = svc.get_erc721_token_transfer_events(option, params)
    elif normalized == "erc1155":
        records = svc.get_erc1155_token_transfer_events(option, params)
    else:
        raise ValueError(f"Unsupported token_type '{token_type}'. Expected erc20|erc721|erc1155.")
    return {"token_type": normalized, "transfers": [record.to_json() for record in records]}


@server.tool(
    name="list_mined_blocks",
    title="List Mined Blocks",
    description="List blocks (or uncles) mined by an address. page and offset must be given together.",
)
def list_mined_blocks(
    address: str,
    network: Optional[str] = None,
    block_type: Optional[str] = None,
    page: Optional[int] = None,
    offset: Optional[int] = None,
) -> dict:
    if (page is None) != (offset is None):
        raise ValueError("page and offset must be given together.")
    svc = _get_service(network)
    records = svc.get_mined_blocks(
        address,
        BlockType(block_type) if block_type else None,
        (page, offset) if page is not None else None,
    )
    return {"blocks": [record.to_json() for record in records]}


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Etherscan accounts MCP server.")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="Transport protocol for MCP.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--mount-path",
        default="/",
        help="Mount path for SSE transport (only when transport=sse).",
    )
    args = parser.parse_args()

    # FastMCP uses host/port only for SSE/HTTP transports; stdio ignores them.
    server.settings.host = args.host
    server.settings.port = args.port

    if args.transport == "sse":
        server.run(transport="sse", mount_path=args.mount_path)
    else:
        server.run(transport=args.transport)


if __name__ == "__main__":
    main()
