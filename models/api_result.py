# models/api_result.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")

ALL_ROOM_TYPES = "All"


@dataclass
class ApiResult(Generic[T]):
    """Tagged outcome of a hotel API call: either data or an error message."""
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "ApiResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "ApiResult[T]":
        return cls(success=False, error=error)


@dataclass
class HotelQuery:
    search: str = ""
    room_type: str = ALL_ROOM_TYPES
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rating: Optional[float] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.search:
            params["search"] = self.search
        if self.room_type and self.room_type != ALL_ROOM_TYPES:
            params["roomType"] = self.room_type
        if self.min_price:
            params["minPrice"] = str(self.min_price)
        if self.max_price:
            params["maxPrice"] = str(self.max_price)
        if self.min_rating:
            params["minRating"] = str(self.min_rating)
        return params
