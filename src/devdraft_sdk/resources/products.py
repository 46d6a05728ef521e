from __future__ import annotations

from typing import Any, Sequence

from .._conversion import parse_request
from ..models import ProductCreateParams, ProductListParams, ProductUpdateParams
from ._resource import APIResource, Options, Params, merge_params, multipart_parts


class Products(APIResource):
    """Product catalog. Create, update and image upload are sent as multipart/form-data.

    ``files`` accepts anything httpx accepts as an upload value: an open file,
    bytes, or a ``(filename, content, content_type)`` tuple.
    """

    def create(
        self,
        params: Params = None,
        *,
        files: Sequence[Any] = (),
        options: Options = None,
        **fields: Any,
    ) -> Any:
        form, request_options = parse_request(ProductCreateParams, merge_params(params, fields), options)
        return self._request("POST", "api/v0/products", files=multipart_parts(form, files), options=request_options)

    def retrieve(self, product_id: str, *, options: Options = None) -> Any:
        return self._request("GET", "api/v0/products/{0}", product_id, options=options)

    def update(
        self,
        product_id: str,
        params: Params = None,
        *,
        files: Sequence[Any] = (),
        options: Options = None,
        **fields: Any,
    ) -> Any:
        form, request_options = parse_request(ProductUpdateParams, merge_params(params, fields), options)
        return self._request(
            "PUT",
            "api/v0/products/{0}",
            product_id,
            files=multipart_parts(form, files),
            options=request_options,
        )

    def list(self, params: Params = None, *, options: Options = None, **fields: Any) -> Any:
        query, request_options = parse_request(ProductListParams, merge_params(params, fields), options)
        return self._request("GET", "api/v0/products", query=query, options=request_options)

    def delete(self, product_id: str, *, options: Options = None) -> Any:
        return self._request("DELETE", "api/v0/products/{0}", product_id, options=options)

    def upload_images(self, product_id: str, images: Sequence[Any], *, options: Options = None) -> Any:
        """Append images to an existing product."""
        return self._request(
            "POST",
            "api/v0/products/{0}/images",
            product_id,
            files=multipart_parts({}, images),
            options=options,
        )
