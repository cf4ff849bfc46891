import argparse
import json
import logging
import sys
from typing import Any, Optional

from .config import load_config
from .query import (
    BlockType,
    Tag,
    TxListParams,
    make_internal_tx_query,
    make_token_query,
    make_tx_list_params,
)
from .service import AccountService

TOKEN_STANDARDS = ("erc20", "erc721", "erc1155")


def _add_list_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--start-block", type=int, help="First block to include. Defaults to 0.")
    parser.add_argument("--end-block", type=int, help="Last block to include. Defaults to 99999999.")
    parser.add_argument("--page", type=int, help="Page number. Defaults to 0.")
    parser.add_argument("--offset", type=int, help="Page size. Defaults to 10000.")
    parser.add_argument("--sort", choices=["asc", "desc"], help="Sort order. Defaults to asc.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query Etherscan account endpoints and print decoded records.",
        allow_abbrev=False,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    balance_parser = subparsers.add_parser("balance", help="Ether balance of one address")
    balance_parser.add_argument("--address", required=True, help="Account address (0x-prefixed).")
    balance_parser.add_argument(
        "--tag",
        choices=[tag.value for tag in Tag],
        help="Block parameter. Defaults to latest.",
    )

    balances_parser = subparsers.add_parser("balances", help="Ether balances of several addresses")
    balances_parser.add_argument(
        "--address",
        required=True,
        action="append",
        help="Account address (0x-prefixed). Repeat for each address.",
    )
    balances_parser.add_argument(
        "--tag",
        choices=[tag.value for tag in Tag],
        help="Block parameter. Defaults to latest.",
    )

    txlist_parser = subparsers.add_parser("txlist", help="Normal transactions of an address")
    txlist_parser.add_argument("--address", required=True, help="Account address (0x-prefixed).")
    _add_list_arguments(txlist_parser)

    internal_parser = subparsers.add_parser(
        "txlist-internal",
        help="Internal transactions by address, by tx hash, or by block range only",
    )
    internal_parser.add_argument("--address", help="Account address (0x-prefixed).")
    internal_parser.add_argument("--tx-hash", help="Transaction hash (0x-prefixed).")
    _add_list_arguments(internal_parser)

    token_parser = subparsers.add_parser("token-transfers", help="Token transfer events")
    token_parser.add_argument(
        "--standard",
        choices=TOKEN_STANDARDS,
        default="erc20",
        help="Token standard. Defaults to erc20.",
    )
    token_parser.add_argument("--address", help="Account address (0x-prefixed).")
    token_parser.add_argument("--contract", help="Token contract address (0x-prefixed).")
    _add_list_arguments(token_parser)

    mined_parser = subparsers.add_parser("mined-blocks", help="Blocks mined by an address")
    mined_parser.add_argument("--address", required=True, help="Miner address (0x-prefixed).")
    mined_parser.add_argument(
        "--block-type",
        choices=[block_type.value for block_type in BlockType],
        help="blocks or uncles. Defaults to blocks.",
    )
    mined_parser.add_argument("--page", type=int, help="Page number (requires --offset).")
    mined_parser.add_argument("--offset", type=int, help="Page size (requires --page).")

    return parser


def _list_params(args: argparse.Namespace) -> TxListParams:
    return make_tx_list_params(args.start_block, args.end_block, args.page, args.offset, args.sort)


def _run(service: AccountService, args: argparse.Namespace) -> Any:
    if args.command == "balance":
        tag = Tag(args.tag) if args.tag else None
        return service.get_ether_balance_single(args.address, tag).to_json()
    if args.command == "balances":
        tag = Tag(args.tag) if args.tag else None
        return [item.to_json() for item in service.get_ether_balance_multi(args.address, tag)]
    if args.command == "txlist":
        records = service.get_transactions(args.address, _list_params(args))
    elif args.command == "txlist-internal":
        option = make_internal_tx_query(args.address, args.tx_hash)
        records = service.get_internal_transactions(option, _list_params(args))
    elif args.command == "token-transfers":
        option = make_token_query(args.address, args.contract)
        fetch = {
            "erc20": service.get_erc20_token_transfer_events,
            "erc721": service.get_erc721_token_transfer_events,
            "erc1155": service.get_erc1155_token_transfer_events,
        }[args.standard]
        records = fetch(option, _list_params(args))
    elif args.command == "mined-blocks":
        if (args.page is None) != (args.offset is None):
            raise ValueError("--page and --offset must be given together.")
        block_type = BlockType(args.block_type) if args.block_type else None
        page_and_offset = (args.page, args.offset) if args.page is not None else None
        records = service.get_mined_blocks(args.address, block_type, page_and_offset)
    else:
        raise ValueError(f"Unknown command '{args.command}'.")
    return [record.to_json() for record in records]


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
        logging.basicConfig(level=config.log_level, stream=sys.stderr)
        service = AccountService.from_config(config)
        result = _run(service, args)
        print(json.dumps(result, indent=2))
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
