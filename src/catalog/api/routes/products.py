"""
Product Routes
"""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import Query, Response, status

from shared.api.base_router import create_api_router
from shared.api.dependencies import MediatorDep
from shared.api.response_models import PaginatedResponse
from catalog.api.schemas.product_schemas import (
    ApplyDiscountRequest,
    CategoriesRequest,
    CreateProductRequest,
    ProductResponse,
    UpdatePriceRequest,
    UpdateProductRequest,
    UpdateStockRequest,
)
from catalog.application.commands import (
    AddProductCategoriesCommand,
    ApplyProductDiscountCommand,
    CreateProductCommand,
    DeleteProductCommand,
    RemoveProductCategoryCommand,
    RestoreProductCommand,
    UpdateProductCommand,
    UpdateProductPriceCommand,
    UpdateProductStockCommand,
)
from catalog.application.queries import GetProductByIdQuery, GetProductsQuery

router = create_api_router(prefix="/catalog/products", tags=["Catalog"])


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
)
async def create_product(body: CreateProductRequest, mediator: MediatorDep) -> ProductResponse:
    dto = await mediator.send(
        CreateProductCommand(
            name=body.name,
            description=body.description,
            price=body.price,
            image_file=body.image_file,
            categories=tuple(body.categories),
            stock_quantity=body.stock_quantity,
        )
    )
    return ProductResponse.model_validate(dto)


@router.get("", response_model=PaginatedResponse[ProductResponse], summary="List Products")
async def list_products(
    mediator: MediatorDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    category: Optional[str] = Query(None, max_length=100),
) -> PaginatedResponse[ProductResponse]:
    result = await mediator.send(GetProductsQuery(page=page, page_size=page_size, category=category))
    return PaginatedResponse[ProductResponse].build(
        data=[ProductResponse.model_validate(item) for item in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.get("/{product_id}", response_model=ProductResponse, summary="Get Product")
async def get_product(product_id: UUID, mediator: MediatorDep) -> ProductResponse:
    dto = await mediator.send(GetProductByIdQuery(product_id=product_id))
    return ProductResponse.model_validate(dto)


@router.put("/{product_id}", response_model=ProductResponse, summary="Update Product Details")
async def update_product(product_id: UUID, body: UpdateProductRequest, mediator: MediatorDep) -> ProductResponse:
    dto = await mediator.send(
        UpdateProductCommand(
            product_id=product_id,
            name=body.name,
            description=body.description,
            image_file=body.image_file,
        )
    )
    return ProductResponse.model_validate(dto)


@router.put("/{product_id}/price", response_model=ProductResponse, summary="Update Product Price")
async def update_product_price(product_id: UUID, body: UpdatePriceRequest, mediator: MediatorDep) -> ProductResponse:
    dto = await mediator.send(
        UpdateProductPriceCommand(product_id=product_id, new_price=body.price, reason=body.reason)
    )
    return ProductResponse.model_validate(dto)


@router.put("/{product_id}/stock", response_model=ProductResponse, summary="Update Product Stock")
async def update_product_stock(product_id: UUID, body: UpdateStockRequest, mediator: MediatorDep) -> ProductResponse:
    dto = await mediator.send(
        UpdateProductStockCommand(product_id=product_id, stock_quantity=body.stock_quantity)
    )
    return ProductResponse.model_validate(dto)


@router.post("/{product_id}/discount", response_model=ProductResponse, summary="Apply Product Discount")
async def apply_product_discount(
    product_id: UUID, body: ApplyDiscountRequest, mediator: MediatorDep
) -> ProductResponse:
    dto = await mediator.send(
        ApplyProductDiscountCommand(product_id=product_id, percentage=body.percentage, reason=body.reason)
    )
    return ProductResponse.model_validate(dto)


@router.post("/{product_id}/categories", response_model=ProductResponse, summary="Add Product Categories")
async def add_product_categories(
    product_id: UUID, body: CategoriesRequest, mediator: MediatorDep
) -> ProductResponse:
    dto = await mediator.send(
        AddProductCategoriesCommand(product_id=product_id, categories=tuple(body.categories))
    )
    return ProductResponse.model_validate(dto)


@router.delete(
    "/{product_id}/categories/{category}",
    response_model=ProductResponse,
    summary="Remove Product Category",
)
async def remove_product_category(product_id: UUID, category: str, mediator: MediatorDep) -> ProductResponse:
    dto = await mediator.send(RemoveProductCategoryCommand(product_id=product_id, category=category))
    return ProductResponse.model_validate(dto)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Product")
async def delete_product(product_id: UUID, mediator: MediatorDep) -> Response:
    await mediator.send(DeleteProductCommand(product_id=product_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{product_id}/restore", response_model=ProductResponse, summary="Restore Product")
async def restore_product(product_id: UUID, mediator: MediatorDep) -> ProductResponse:
    dto = await mediator.send(RestoreProductCommand(product_id=product_id))
    return ProductResponse.model_validate(dto)
