# clients/hotel_api_client.py
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple

import requests

from config import Config
from models.api_result import ApiResult, HotelQuery
from models.hotel import Hotel, HotelData, MalformedHotelPayload
from models.stats import HotelStats
from utils.logger import setup_logger

logger = setup_logger(__name__)

MALFORMED_RESPONSE = "Received malformed hotel data from the server"


class HotelApiClient:
    """
    Thin client for the hotel REST service.
    Every call returns an ApiResult; transport failures, non-success
    responses and malformed payloads never raise.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or Config.HOTEL_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else Config.HOTEL_API_TIMEOUT
        self.session = session or requests.Session()

    # GET /hotels
    def list_hotels(self, query: Optional[HotelQuery] = None) -> ApiResult[List[Hotel]]:
        params = (query or HotelQuery()).to_params()
        body, error = self._request("GET", "/hotels", "Failed to fetch hotels", params=params)
        if error is not None:
            return ApiResult.failure(error)

        data = body.get("data") or []
        if not isinstance(data, list):
            return self._malformed("list_hotels", "data is not a list")
        try:
            hotels = [Hotel.from_payload(item) for item in data]
        except MalformedHotelPayload as e:
            return self._malformed("list_hotels", e)
        return ApiResult.ok(hotels)

    # GET /hotels/{id}
    def get_hotel(self, hotel_id: str) -> ApiResult[Hotel]:
        body, error = self._request("GET", f"/hotels/{hotel_id}", "Failed to fetch hotel")
        if error is not None:
            return ApiResult.failure(error)
        return self._single_hotel("get_hotel", body)

    # POST /hotels
    def create_hotel(self, data: HotelData) -> ApiResult[Hotel]:
        body, error = self._request("POST", "/hotels", "Failed to create hotel", json=data.to_payload())
        if error is not None:
            return ApiResult.failure(error)
        return self._single_hotel("create_hotel", body)

    # PUT /hotels/{id}
    def update_hotel(self, hotel_id: str, data: HotelData) -> ApiResult[Hotel]:
        body, error = self._request(
            "PUT", f"/hotels/{hotel_id}", "Failed to update hotel", json=data.to_payload()
        )
        if error is not None:
            return ApiResult.failure(error)
        return self._single_hotel("update_hotel", body)

    # DELETE /hotels/{id}
    def delete_hotel(self, hotel_id: str) -> ApiResult[None]:
        _, error = self._request("DELETE", f"/hotels/{hotel_id}", "Failed to delete hotel")
        if error is not None:
            return ApiResult.failure(error)
        return ApiResult.ok()

    # GET /hotels/stats
    def get_stats(self) -> ApiResult[HotelStats]:
        body, error = self._request("GET", "/hotels/stats", "Failed to fetch statistics")
        if error is not None:
            return ApiResult.failure(error)

        try:
            return ApiResult.ok(HotelStats.from_payload(body.get("data")))
        except MalformedHotelPayload as e:
            return self._malformed("get_stats", e)

    def _request(
        self, method: str, path: str, default_error: str, **kwargs: Any
    ) -> Tuple[Dict[str, Any], Optional[str]]:
        url = f"{self.base_url}{path}"
        try:
            res = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            return {}, default_error

        try:
            body = res.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            logger.error("%s %s returned a non-JSON body (status %s)", method, url, res.status_code)
            return {}, default_error

        if not res.ok or not body.get("success"):
            message = body.get("message") or body.get("error") or default_error
            logger.error("%s %s failed (status %s): %s", method, url, res.status_code, message)
            return body, str(message)

        return body, None

    def _single_hotel(self, operation: str, body: Dict[str, Any]) -> ApiResult[Hotel]:
        try:
            return ApiResult.ok(Hotel.from_payload(body.get("data")))
        except MalformedHotelPayload as e:
            return self._malformed(operation, e)

    def _malformed(self, operation: str, reason: Any) -> ApiResult[Any]:
        logger.error("%s: malformed response: %s", operation, reason)
        return ApiResult.failure(MALFORMED_RESPONSE)
