"""S&S Activewear V2 REST client.

The vendor API has no free-text search, so ``search_products`` combines three
lookups and merges them:

1. **SKU** — queries that look like a SKU (``B00760033``) are resolved by
   fetching the style and keeping the exact SKU match.
2. **Style** — a style number is extracted from the query and the whole
   style is returned (capped).
3. **Name** — queries containing letters are sent as a brand filter and the
   results narrowed to brand/style names containing the query.

Individual lookups never raise; a failing lookup contributes no results.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from swagsuite.core.exceptions import SupplierAPIError
from swagsuite.schemas.ss_activewear import SsProduct

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.ssactivewear.com/V2"

# Small style used for connection checks and unfiltered product pulls
SAMPLE_STYLE = "00760"

STYLE_SEARCH_LIMIT = 50
NAME_SEARCH_LIMIT = 20

_SKU_LIKE = re.compile(r"^[A-Z]?\d+")
_LETTER_PREFIXED = re.compile(r"^[A-Z](\d+)")
_DIGITS_PREFIXED = re.compile(r"^\d+")
_HAS_LETTER = re.compile(r"[A-Za-z]")


def extract_style_number(query: str) -> Optional[str]:
    """Derive a style number from a SKU-ish query.

    ``B00760033`` -> ``00760`` (digits after the letter, first five);
    ``3001`` -> ``3001``; ``00760033`` -> ``00760``; anything else -> ``None``.
    """
    match = _LETTER_PREFIXED.match(query)
    if match:
        return match.group(1)[:5]
    if _DIGITS_PREFIXED.match(query):
        return query[:5]
    return None


class SsActivewearClient:
    """Thin async wrapper around the S&S Activewear REST API.

    Authenticates with HTTP Basic (account number / API key). Pass ``client``
    to share or mock the underlying ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        account_number: str,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = client or httpx.AsyncClient(timeout=timeout)
        self._auth = httpx.BasicAuth(account_number, api_key)

    async def aclose(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _get(self, path: str, params: Optional[dict[str, str]] = None) -> httpx.Response:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("S&S GET %s params=%s", url, params)
        return await self._http.get(
            url,
            params=params,
            auth=self._auth,
            headers={"Content-Type": "application/json"},
        )

    async def _get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        """GET and decode JSON; raise :class:`SupplierAPIError` on non-2xx or a non-JSON body."""
        response = await self._get(path, params)
        if not response.is_success:
            raise SupplierAPIError(
                f"S&S Activewear API error: {response.status_code} {response.reason_phrase}"
            )
        try:
            return response.json()
        except ValueError as exc:
            raise SupplierAPIError("S&S Activewear API returned invalid JSON") from exc

    async def _get_products_quietly(self, params: dict[str, str], label: str) -> list[SsProduct]:
        """Product lookup used by search strategies: never raises."""
        try:
            response = await self._get("products/", params)
            if not response.is_success:
                logger.info("%s search failed: %s", label, response.status_code)
                return []
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.info("%s search error: %s", label, exc)
            return []
        if not isinstance(payload, list):
            return []
        return _parse_products(payload)

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    async def test_connection(self) -> bool:
        try:
            response = await self._get("products/", {"style": SAMPLE_STYLE})
        except httpx.HTTPError as exc:
            logger.error("S&S Activewear connection test failed: %s", exc)
            return False
        return response.is_success

    async def get_product_rows(self, style: Optional[str] = None) -> list[Any]:
        """Raw, unvalidated product rows for ``style`` (defaults to a small sample style)."""
        payload = await self._get_json("products/", {"style": style or SAMPLE_STYLE})
        if not isinstance(payload, list):
            raise SupplierAPIError("S&S Activewear API returned an unexpected payload")
        return payload

    async def get_products(self, style: Optional[str] = None) -> list[SsProduct]:
        return _parse_products(await self.get_product_rows(style))

    async def get_categories(self) -> list[dict[str, Any]]:
        return await self._get_json("categories/")

    async def get_brands(self) -> list[dict[str, Any]]:
        return await self._get_json("brands/")

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_products(self, query: str) -> list[SsProduct]:
        """Run every applicable strategy concurrently and merge by SKU.

        Order of the merged list follows strategy order (SKU, style, name);
        the first occurrence of a SKU wins.
        """
        lookups = []
        if _SKU_LIKE.match(query):
            lookups.append(self._search_by_sku(query))
        style_number = extract_style_number(query)
        if style_number:
            lookups.append(self._search_by_style(style_number))
        if _HAS_LETTER.search(query):
            lookups.append(self._search_by_name(query))

        outcomes = await asyncio.gather(*lookups, return_exceptions=True)

        merged: list[SsProduct] = []
        seen: set[str] = set()
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                logger.warning("S&S search strategy failed for %r: %s", query, outcome)
                continue
            for product in outcome:
                if product.sku not in seen:
                    seen.add(product.sku)
                    merged.append(product)

        logger.info("S&S search for %r found %d unique products", query, len(merged))
        return merged

    async def _search_by_sku(self, query: str) -> list[SsProduct]:
        style_number = extract_style_number(query)
        if not style_number:
            return []
        products = await self._get_products_quietly({"style": style_number}, "SKU")
        wanted = query.lower()
        return [p for p in products if p.sku.lower() == wanted][:1]

    async def _search_by_style(self, style_number: str) -> list[SsProduct]:
        products = await self._get_products_quietly({"style": style_number}, "Style")
        return products[:STYLE_SEARCH_LIMIT]

    async def _search_by_name(self, query: str) -> list[SsProduct]:
        products = await self._get_products_quietly({"brand": query}, "Brand")
        needle = query.lower()
        matches = [
            p for p in products
            if needle in (p.brand_name or "").lower() or needle in (p.style_name or "").lower()
        ]
        return matches[:NAME_SEARCH_LIMIT]

    async def get_product_by_sku(self, sku: str) -> Optional[SsProduct]:
        """Exact SKU match from a search, else the best (first) result."""
        results = await self.search_products(sku)
        wanted = sku.lower()
        for product in results:
            if product.sku.lower() == wanted:
                return product
        return results[0] if results else None


def _parse_products(payload: list[Any]) -> list[SsProduct]:
    """Validate raw rows, skipping any the vendor sent without a usable SKU."""
    products: list[SsProduct] = []
    for row in payload:
        try:
            products.append(SsProduct.model_validate(row))
        except PydanticValidationError:
            logger.debug("Skipping malformed S&S product row: %r", row)
    return products
