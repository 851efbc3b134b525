from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any
from urllib.parse import quote

import httpx

from entitlement_engine.domain.entities.customer_info import CustomerInfo
from entitlement_engine.domain.entities.purchase import PurchaseResult, PurchasesPackage
from entitlement_engine.domain.exceptions import BillingNotReadyError, BillingProviderError
from entitlement_engine.infrastructure.mappers.revenuecat_subscriber_mapper import (
    map_subscriber_to_customer_info,
)
from entitlement_engine.shared.clock import utcnow


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevenueCatClientSettings:
    api_base: str
    api_key: str
    platform: str
    timeout_seconds: float


class RevenueCatClient:
    """BillingPort over the RevenueCat REST API, scoped to one app user."""

    def __init__(
        self,
        settings: RevenueCatClientSettings,
        *,
        app_user_id: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._app_user_id = app_user_id.strip()
        self._transport = transport

    def is_ready(self) -> bool:
        return bool(self._settings.api_key and self._app_user_id)

    async def get_customer_info(self) -> CustomerInfo:
        payload = await self._request("GET", self._subscriber_path())
        return self._to_customer_info(payload)

    async def restore_purchases(self) -> CustomerInfo:
        # The store sync happens on the device; the server copy is the source of truth.
        logger.info("revenuecat_client: restore app_user_id=%s", self._app_user_id)
        payload = await self._request("GET", self._subscriber_path())
        return self._to_customer_info(payload)

    async def purchase_package(self, package: PurchasesPackage) -> PurchaseResult:
        if not package.store_token:
            raise BillingProviderError(
                "A store transaction token is required to record a purchase.",
                code="invalid_receipt",
                readable_error_code="INVALID_RECEIPT",
            )
        payload = await self._request(
            "POST",
            "/receipts",
            json={
                "app_user_id": self._app_user_id,
                "fetch_token": package.store_token,
                "product_id": package.product_identifier,
            },
            headers={"X-Platform": self._settings.platform},
        )
        logger.info(
            "revenuecat_client: receipt_posted app_user_id=%s product=%s",
            self._app_user_id,
            package.product_identifier,
        )
        return PurchaseResult(
            customer_info=self._to_customer_info(payload),
            product_identifier=package.product_identifier,
        )

    def _subscriber_path(self) -> str:
        return f"/subscribers/{quote(self._app_user_id, safe='')}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Content-Type": "application/json",
        }

    def _to_customer_info(self, payload: dict) -> CustomerInfo:
        subscriber = payload.get("subscriber")
        if not isinstance(subscriber, dict):
            raise BillingProviderError(
                "RevenueCat response is missing the subscriber object.",
                code="invalid_response",
            )
        try:
            return map_subscriber_to_customer_info(subscriber, now=utcnow())
        except (TypeError, ValueError) as exc:
            raise BillingProviderError(
                "RevenueCat subscriber payload could not be parsed.",
                code="invalid_response",
            ) from exc

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict:
        if not self.is_ready():
            raise BillingNotReadyError("RevenueCat API key and app user id are required.")

        request_headers = self._headers()
        if headers:
            request_headers.update(headers)

        try:
            async with httpx.AsyncClient(
                base_url=self._settings.api_base.rstrip("/"),
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, json=json, headers=request_headers)
        except httpx.TimeoutException as exc:
            raise BillingProviderError("RevenueCat request timed out.", code="timeout") from exc
        except httpx.HTTPError as exc:
            raise BillingProviderError("RevenueCat request failed.", code="network_error") from exc

        if response.status_code >= 400:
            body = _safe_json(response)
            logger.warning(
                "revenuecat_client: http_error method=%s path=%s status=%s body=%s",
                method,
                path,
                response.status_code,
                response.text[:200],
            )
            raise BillingProviderError(
                str(body.get("message") or f"RevenueCat returned HTTP {response.status_code}."),
                code=body.get("code", response.status_code),
                readable_error_code=body.get("readable_error_code"),
            )

        payload = _safe_json(response)
        if not payload:
            raise BillingProviderError("RevenueCat response is not valid JSON.", code="invalid_response")
        return payload


def _safe_json(response: httpx.Response) -> dict:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
