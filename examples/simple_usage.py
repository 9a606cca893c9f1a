#!/usr/bin/env python3
"""
Simple example of using sweb3-signer.
"""
import os
import logging

from sweb3_signer import SignerError, next_nonce, sign, unsign


def main():
    """
    Demonstrate basic usage of sign and unsign.

    This example shows how to:
    1. Preview a transaction without a key
    2. Sign a transaction offline
    3. Decode the signed envelope again
    """
    logging.basicConfig(level=logging.INFO)

    # Read configuration from environment
    PRIVATE_KEY = os.environ.get("PRIVATE_KEY")
    CHAIN_ID = int(os.environ.get("CHAIN_ID", "1"))
    CURRENT_BLOCK = int(os.environ.get("CURRENT_BLOCK", "0"))

    params = {
        "nonce": next_nonce(),
        "quota": 1000000,
        # Usually the current block number + 88
        "validUntilBlock": CURRENT_BLOCK + 88,
        "chainId": CHAIN_ID,
        "to": "0x1234567890123456789012345678901234567890",
        "value": 100,
        "data": "",
    }

    # Without a key we get the fields back
    preview = sign(params)
    print(f"Unsigned preview: {preview.model_dump(by_alias=True)}")

    if not PRIVATE_KEY:
        print("Set PRIVATE_KEY to sign the transaction")
        return

    try:
        signed = sign({**params, "privateKey": PRIVATE_KEY})
    except SignerError as e:
        print(f"Invalid transaction ({e.kind.value}): {e}")
        return

    print(f"Signed transaction: 0x{signed}")

    decoded = unsign(signed)
    print(f"Sender: {decoded.sender.address}")
    print(f"Value: {decoded.transaction.value_int}")
    print(f"Valid until block: {decoded.transaction.valid_until_block}")


if __name__ == "__main__":
    main()
