#!/usr/bin/env python3
"""Testhelper CLI for keysmith interoperability testing."""

import json
import sys

from keysmith import CipherContext, Encrypter, KdfConfig, derive_key_hex
from keysmith.crypto import from_hex, nonce_from_hex, to_hex


def derive(config: KdfConfig) -> None:
    """Derive key material from stdin JSON and output its hex."""
    data = json.loads(sys.stdin.read())
    hash_key = derive_key_hex(
        data["password"],
        data["salt"],
        config.rounds,
        prf=config.prf,
        key_size=config.key_size,
    )
    print(json.dumps({"hashKey": hash_key}))


def encrypt(config: KdfConfig) -> None:
    """Encrypt stdin JSON plaintext and output ciphertext plus context."""
    data = json.loads(sys.stdin.read())
    encrypter = Encrypter.from_password(data["password"], data["salt"], config)
    context = encrypter.context
    output = {
        "ciphertext": encrypter.encrypt(data["plaintext"]),
        "hashKey": context.derived_key_hex,
        "key": to_hex(context.key),
        "algorithm": context.algorithm,
    }
    print(json.dumps(output))


def decrypt() -> None:
    """Rebuild a context from stdin JSON and decrypt its ciphertext."""
    data = json.loads(sys.stdin.read())
    context = CipherContext(
        key=from_hex(data["key"]),
        nonce=nonce_from_hex(data["hashKey"]),
        derived_key_hex=data["hashKey"],
    )
    plaintext = Encrypter(context).decrypt(data["ciphertext"])
    print(json.dumps({"plaintext": plaintext}))


def roundtrip(config: KdfConfig) -> None:
    """Encrypt and decrypt stdin JSON plaintext under one context."""
    data = json.loads(sys.stdin.read())
    encrypter = Encrypter.from_password(data["password"], data["salt"], config)
    ciphertext = encrypter.encrypt(data["plaintext"])
    plaintext = encrypter.decrypt(ciphertext)
    print(json.dumps({"success": plaintext == data["plaintext"], "ciphertext": ciphertext}))


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <command>", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]
    config = KdfConfig.from_env()

    if command == "derive":
        derive(config)
    elif command == "encrypt":
        encrypt(config)
    elif command == "decrypt":
        decrypt()
    elif command == "roundtrip":
        roundtrip(config)
    else:
        print(f"unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
