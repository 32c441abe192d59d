"""Solana RPC client for token account scans.

The client extends BaseAPIClient to inherit lazy httpx client creation,
error translation and resource cleanup. It speaks raw JSON-RPC so the
server-side filters of getProgramAccounts can be passed through as-is.
"""

from typing import Any
from urllib.parse import parse_qsl, urlsplit, urlunsplit

import structlog
from solders.pubkey import Pubkey

from solreclaim.config.settings import Settings, get_settings
from solreclaim.constants.solana import (
    RPC_COMMITMENT,
    TOKEN_ACCOUNT_OWNER_OFFSET,
    TOKEN_ACCOUNT_SIZE,
    TOKEN_PROGRAM_ID,
)
from solreclaim.core.exceptions import ChainQueryError, ExternalServiceError
from solreclaim.core.wallet.utils import mask_address
from solreclaim.services.base import BaseAPIClient
from solreclaim.services.solana.models import TokenAccountList, TokenAccountRecord

log = structlog.get_logger(__name__)


class SolanaRPCClient(BaseAPIClient):
    """Client for Solana JSON-RPC operations.

    Example:
        client = SolanaRPCClient()
        count = await client.fetch_empty_token_accounts(pubkey)
        await client.close()
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize Solana RPC client with settings."""
        settings = settings or get_settings()
        # Query parameters (e.g. api-key) are sent per request, not in base_url
        endpoint = urlsplit(settings.rpc_url)
        super().__init__(
            base_url=urlunsplit(endpoint._replace(query="")),
            timeout=settings.http_timeout_seconds,
            headers={"Content-Type": "application/json"},
            service_name="solana_rpc",
        )
        self._query_params = dict(parse_qsl(endpoint.query))
        self._request_id = 0

    async def _call(self, method: str, params: list[Any]) -> Any:
        """Perform a JSON-RPC call and return its `result`.

        Raises:
            ChainQueryError: On transport failure, RPC error or malformed body.
        """
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_id,
            "method": method,
            "params": params,
        }

        try:
            response = await self.post("", json=payload, params=self._query_params or None)
            data = response.json()
        except ExternalServiceError as e:
            raise ChainQueryError(f"{method} failed: {e}") from e
        except ValueError as e:
            raise ChainQueryError(f"{method} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise ChainQueryError(f"{method} returned unexpected payload")

        if "error" in data:
            error = data["error"]
            log.warning("solana_rpc_error", method=method, error=error)
            raise ChainQueryError(f"{method} RPC error: {error}")

        if "result" not in data:
            raise ChainQueryError(f"{method} response has no result")

        return data["result"]

    async def get_program_accounts(
        self,
        program_id: str,
        filters: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """Call getProgramAccounts with jsonParsed encoding.

        Args:
            program_id: Program that owns the accounts (base58).
            filters: Server-side filters (dataSize / memcmp), ANDed by the node.

        Returns:
            Raw result entries.

        Raises:
            ChainQueryError: If the call fails or the result is not a list.
        """
        result = await self._call(
            "getProgramAccounts",
            [
                program_id,
                {
                    "encoding": "jsonParsed",
                    "commitment": RPC_COMMITMENT,
                    "filters": filters,
                },
            ],
        )
        if not isinstance(result, list):
            raise ChainQueryError("getProgramAccounts result is not a list")
        return result

    async def get_token_accounts_by_owner(self, owner: Pubkey) -> TokenAccountList:
        """Get every SPL token account owned by a wallet.

        Uses getProgramAccounts on the Token Program with:
        - dataSize 165 (token account layout)
        - memcmp at offset 32 (owner field) equal to the wallet address

        Args:
            owner: Wallet public key.

        Returns:
            Parsed token accounts.

        Raises:
            ChainQueryError: If the RPC call fails or any entry is malformed.
        """
        address = str(owner)
        filters = [
            {"dataSize": TOKEN_ACCOUNT_SIZE},
            {"memcmp": {"offset": TOKEN_ACCOUNT_OWNER_OFFSET, "bytes": address}},
        ]

        log.debug("solana_get_token_accounts", wallet_address=mask_address(address))

        try:
            raw_accounts = await self.get_program_accounts(TOKEN_PROGRAM_ID, filters)
            accounts = [TokenAccountRecord.from_rpc(acc) for acc in raw_accounts]
        except ChainQueryError as e:
            e.wallet_address = address
            log.error(
                "solana_get_token_accounts_failed",
                wallet_address=mask_address(address),
                error=str(e),
            )
            raise
        except (KeyError, TypeError, ValueError) as e:
            log.error(
                "solana_token_account_parse_error",
                wallet_address=mask_address(address),
                error=str(e),
            )
            raise ChainQueryError(
                f"Malformed token account data: {e}", wallet_address=address
            ) from e

        return TokenAccountList(accounts=accounts)

    async def fetch_empty_token_accounts(self, owner: Pubkey) -> int:
        """Count the wallet's token accounts whose display balance is zero.

        Args:
            owner: Wallet public key.

        Returns:
            Number of empty token accounts (0 is a normal result).

        Raises:
            ChainQueryError: If the scan fails. No partial count is returned.
        """
        token_accounts = await self.get_token_accounts_by_owner(owner)
        empty_count = len(token_accounts.empty_accounts)

        log.info(
            "solana_token_accounts_scanned",
            wallet_address=mask_address(owner),
            total_accounts=token_accounts.count,
            empty_accounts=empty_count,
        )
        return empty_count
