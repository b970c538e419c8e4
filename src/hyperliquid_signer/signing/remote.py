"""
External wallet signer over JSON-RPC.

Sends the typed-data document to a wallet endpoint with
``eth_signTypedData_v4`` and returns the wallet's hex signature. The call
may block on user approval; it is awaited like any other I/O and is never
retried here.
"""

import itertools
from typing import Any, Dict, Optional

import httpx

from ..engine.exceptions import SigningError
from ..utils import logger, normalize_address
from .signers import TypedDataSigner
from .standards import TypedDataDocument

SIGN_TYPED_DATA_METHOD = "eth_signTypedData_v4"


class RemoteTypedDataSigner(TypedDataSigner):
    """
    ``TypedDataSigner`` backed by a wallet's JSON-RPC endpoint.

    Args:
        rpc_url: Wallet endpoint URL.
        address: Account the wallet should sign with.
        client: Optional shared ``httpx.AsyncClient``; when omitted a
            short-lived client is opened per request.
        timeout: Request timeout in seconds for the short-lived client.

    Usage:
        ```python
        signer = RemoteTypedDataSigner("http://127.0.0.1:8545", "0xabc...")
        signature_hex = await signer.sign_typed_data(document)
        ```
    """

    def __init__(
        self,
        rpc_url: str,
        address: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        self._rpc_url = rpc_url
        self._address = normalize_address(address)
        self._client = client
        self._timeout = timeout
        self._ids = itertools.count(1)

    @property
    def address(self) -> str:
        return self._address

    def build_request(self, document: TypedDataDocument) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": SIGN_TYPED_DATA_METHOD,
            "params": [self._address, document.to_json_string()],
        }

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self._rpc_url, json=payload)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.post(self._rpc_url, json=payload)

    async def sign_typed_data(self, document: TypedDataDocument) -> str:
        payload = self.build_request(document)
        logger.debug(f"requesting {SIGN_TYPED_DATA_METHOD} for {document.primary_type} from {self._rpc_url}")
        try:
            response = await self._post(payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as exc:
            raise SigningError(f"wallet request failed: {exc}") from exc
        except ValueError as exc:
            raise SigningError("wallet returned a non-JSON response") from exc

        if not isinstance(body, dict):
            raise SigningError(f"unexpected wallet response: {body!r}")
        if body.get("error") is not None:
            raise SigningError(f"wallet rejected signing request: {body['error']}")
        result = body.get("result")
        if not isinstance(result, str):
            raise SigningError(f"wallet response has no signature: {body!r}")
        return result
