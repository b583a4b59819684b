#!/usr/bin/env python3
"""
Example: Set a message on the local Shuffle node

Signs a set_message transaction with the latest account in $SHUFFLE_HOME,
submits it, and prints the messages now held by the account.

Usage:
    SHUFFLE_HOME=~/.shuffle/networks/localhost \
    PROJECT_PATH=./my-project \
    python set_message.py "hello blockchain"
"""

import argparse
import json
import logging
import sys

from shuffle_message import MessageClient, ShuffleConfig, ShuffleError


def main():
    parser = argparse.ArgumentParser(description="Set a message on the local Shuffle node")
    parser.add_argument("message", help="Message text to store")
    parser.add_argument(
        "--sequence-number",
        type=int,
        help="Sender sequence number (fetched from the node when omitted)"
    )
    parser.add_argument(
        "--node-url",
        help="Node base URL (default: $SHUFFLE_NODE_URL or http://127.0.0.1:8081)"
    )
    parser.add_argument(
        "--script",
        help="Path to compiled set_message bytecode"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    overrides = {"debug": args.debug}
    if args.node_url:
        overrides["node_url"] = args.node_url
    if args.script:
        overrides["set_message_script"] = args.script

    try:
        config = ShuffleConfig.from_env(**overrides).load()
        with MessageClient(config) as client:
            sequence_number = args.sequence_number
            if sequence_number is None:
                sequence_number = client.sequence_number()

            print(f"Sender: {config.full_sender_address} (sequence {sequence_number})")
            response = client.set_message(args.message, sequence_number)
            print(json.dumps(response, indent=2))
            print("Messages:", client.messages())
    except ShuffleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
