import asyncio
import logging
from typing import Any

import aiohttp

from models.dtos import TokenDescriptor
from models.errors import TransportError

module_logger = logging.getLogger(__name__)


def parse_token_list(payload: Any, chain_id: int) -> list[TokenDescriptor]:
    """Pick the tokens of ``chain_id`` out of a token-list document.

    Entries without an address or an integer ``chainId`` are ignored.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("tokens"), list):
        raise TransportError("Token list response has no 'tokens' array")

    tokens = []
    for item in payload["tokens"]:
        if not isinstance(item, dict):
            continue

        item_chain = item.get("chainId")
        if isinstance(item_chain, bool) or not isinstance(item_chain, int):
            continue
        if item_chain != chain_id or not item.get("address"):
            continue

        decimals = item.get("decimals")

        tokens.append(
            TokenDescriptor(
                address=item["address"],
                chain_id=item_chain,
                name=item.get("name"),
                symbol=item.get("symbol"),
                decimals=decimals if isinstance(decimals, int) and not isinstance(decimals, bool) else None,
            )
        )

    return tokens


class TokenListClient:
    def __init__(self, url: str, chain_id: int, timeout: float = 30):
        self.url = url
        self.chain_id = chain_id
        self.timeout = timeout

    async def _fetch_json(self) -> Any:
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        async with aiohttp.ClientSession(timeout=timeout) as client:
            async with client.get(self.url) as resp:
                resp.raise_for_status()
                return await resp.json(content_type=None)

    async def fetch(self) -> list[TokenDescriptor]:
        try:
            payload = await self._fetch_json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Unable to fetch token list from {self.url}: {e}") from e
        except ValueError as e:
            raise TransportError(f"Token list from {self.url} is not valid JSON: {e}") from e

        tokens = parse_token_list(payload, self.chain_id)
        module_logger.info(f"Token list -> {len(tokens)} tokens on chain {self.chain_id}")

        return tokens
