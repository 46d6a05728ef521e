from __future__ import annotations

from typing import Any

from pydantic import Field

from ._base import DevdraftModel, DevdraftParams


class WebhookCreateParams(DevdraftParams):
    encrypted: bool
    is_active: bool = Field(alias="isActive")
    name: str
    url: str
    signing_secret: str | None = None


class WebhookUpdateParams(DevdraftParams):
    encrypted: bool | None = None
    is_active: bool | None = Field(default=None, alias="isActive")
    name: str | None = None
    signing_secret: str | None = None
    url: str | None = None


class WebhookListParams(DevdraftParams):
    skip: int | None = None
    take: int | None = None


class WebhookResponse(DevdraftModel):
    id: str
    created_at: str
    # Delivery counters; the shape is defined by the provider.
    delivery_stats: Any
    encrypted: bool
    is_active: bool = Field(alias="isActive")
    name: str
    updated_at: str
    url: str
