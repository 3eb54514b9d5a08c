#!/usr/bin/env python3
"""
Simple example of using the Replay SDK.
"""
import os
import sys
import logging

from replay_sdk import ReplayClient, ReplayError, classify


def main():
    """
    Demonstrate basic usage of the ReplayClient.

    This example shows how to:
    1. Classify an identity without touching the network
    2. Resolve the identity to its receipt (replay) address
    3. Derive the associated token account of a wallet
    """
    # Read configuration from environment
    IDENTITY = os.environ.get("IDENTITY", "468526016151814164")
    HINT = os.environ.get("ECOSYSTEM")
    WALLET = os.environ.get("WALLET", "9UuMq6FkcZLbCX84sw6L4sVzkNc6VBhTmASRVQoX6HLV")

    logging.basicConfig(level=logging.INFO)

    try:
        resolved = classify(IDENTITY, HINT)
        print(f"Address: {resolved.address} ({resolved.ecosystem.value})")

        with ReplayClient() as client:
            replay = client.replay_address(IDENTITY, HINT)
            print(f"ReplayAddress: {replay} (bump {replay.bump})")

            ata = client.token_account(WALLET)
            print(f"ATA: {ata}")
    except ReplayError as e:
        print(f"ERROR: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
