from __future__ import annotations

from datetime import datetime

from pydantic import Field

from ._base import DevdraftModel, DevdraftParams


class TaxCreateParams(DevdraftParams):
    name: str
    percentage: float
    active: bool | None = None
    app_ids: list[str] | None = Field(default=None, alias="appIds")
    description: str | None = None


class TaxUpdateParams(DevdraftParams):
    active: bool | None = None
    app_ids: list[str] | None = Field(default=None, alias="appIds")
    description: str | None = None
    name: str | None = None
    percentage: float | None = None


class TaxListParams(DevdraftParams):
    active: bool | None = None
    name: str | None = None
    skip: int | None = None
    take: int | None = None


class TaxResponse(DevdraftModel):
    id: str | None = None
    active: bool | None = None
    created_at: datetime | None = None
    description: str | None = None
    name: str | None = None
    percentage: float | None = None
    updated_at: datetime | None = None
