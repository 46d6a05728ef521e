"""Base classes shared by request parameter records and response records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class DevdraftModel(BaseModel):
    """Response record: unknown wire keys are ignored for forward compatibility."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    def __getattr__(self, item: str) -> Any:
        fields = type(self).model_fields
        if item in fields:
            wire = fields[item].alias or item
            raise AttributeError(
                f"{type(self).__name__}.{item} is unavailable: required field '{wire}' "
                "was missing from the response payload"
            )
        return super().__getattr__(item)


class DevdraftParams(BaseModel):
    """Request parameter record.

    Mappings may use either the Python field name or the wire name. Instances
    are re-validated every time they are sent.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        revalidate_instances="always",
        use_enum_values=False,
    )
