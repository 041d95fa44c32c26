# solkit

A small JSON-over-HTTP service for Solana tooling. It generates ed25519
keypairs, signs and verifies messages, and builds the instructions for
SOL transfers and SPL token operations (initialize mint, mint to,
transfer). Instructions are returned ready to be put into a transaction:
program id, account list and base64-encoded instruction data.

## What it does not do

The service never contacts a cluster or any other network service. It
does not build or submit transactions, fetch balances, or store keys;
it only builds and checks data and hands it back.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running the server

```
solkit
```

By default the server listens on `0.0.0.0:3000`. Both can be changed:

```
solkit --host 127.0.0.1 --port 8080
```

## Endpoints

Every endpoint takes `POST` with a JSON body. Public keys are base58
strings of 32 bytes; a secret key is a base58 string of the 64-byte
keypair (seed followed by public key).

| Path               | Request fields                                   | Result                                        |
|--------------------|--------------------------------------------------|-----------------------------------------------|
| `/keypair`         | none                                             | `pubkey`, `secret`                            |
| `/token/create`    | `mintAuthority`, `mint`, `decimals` (0–255)      | SPL token initialize-mint instruction         |
| `/token/mint`      | `mint`, `destination`, `authority`, `amount`     | SPL token mint-to instruction                 |
| `/message/sign`    | `message`, `secret`                              | `signature` (base64), `public_key`, `message` |
| `/message/verify`  | `message`, `signature` (base64), `pubkey`        | `valid`, `message`, `pubkey`                  |
| `/send/sol`        | `from`, `to`, `lamports`                         | system-program transfer instruction           |
| `/send/token`      | `source`, `destination`, `owner`, `amount`       | SPL token transfer instruction                |

`amount` and `lamports` are unsigned 64-bit integers.

An instruction result looks like this:

```json
{
  "success": true,
  "data": {
    "program_id": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
    "accounts": [
      {"pubkey": "...", "is_signer": false, "is_writable": true}
    ],
    "instruction_data": "..."
  }
}
```

## Errors

Failures come back with `"success": false` and an `error` message:

| Cause                                        | Status | Message                       |
|----------------------------------------------|--------|-------------------------------|
| body not JSON, field missing or wrong type   | 400    | Missing required fields       |
| public key not base58 or not 32 bytes        | 400    | Invalid public key provided   |
| signature not base64 or not 64 bytes         | 400    | Invalid signature provided    |
| integer field out of range                   | 400    | Invalid amount provided       |
| signing failure                              | 500    | Failed to sign message        |

A well-formed signature that does not match the message is not an error:
`/message/verify` answers with `"valid": false`.

Every error the service knows is a member of `solkit.errors.ErrorKind`,
which carries its HTTP status and message.

## Using it as a library

- `solkit.handlers` holds the operations as plain functions
  (`generate_keypair`, `create_token`, `mint_token`, `sign_message`,
  `verify_message`, `send_sol`, `send_token`). Each takes the decoded JSON
  payload and returns the `data` part of the response, raising
  `solkit.errors.AppError` on bad input; `AppError.to_body()` gives the
  error body and `AppError.status` its HTTP status.
- `solkit.base58` provides `b58encode` and `b58decode`.
- `solkit.keys` provides `decode_pubkey` and `encode_pubkey` for 32-byte
  keys, and the `TOKEN_PROGRAM_ID`, `SYSTEM_PROGRAM_ID` and
  `RENT_SYSVAR_ID` constants.
- `solkit.models` provides the `AccountMeta` and `Instruction` dataclasses
  and the `success_body` / `error_body` helpers.
- `solkit.app.create_app()` builds the Starlette application, so it can be
  served by any ASGI server or exercised with Starlette's test client.