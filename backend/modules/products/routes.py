"""
Product API endpoints.

Create and update take multipart forms with an optional `photo` file.
Reads are public and never include photo bytes; the photo has its own
endpoint.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse, Response

from api.dependencies import get_product_service
from api.middleware.auth import is_admin
from api.models.responses import error_response, exception_response, success_response
from shared.exceptions import InvalidIdError, StorefrontError

from .exceptions import PhotoNotAvailableError, ProductNotFoundError
from .interfaces import IProductService
from .models import PhotoUpload, ProductFilters, ProductForm

logger = logging.getLogger(__name__)

router = APIRouter()


def product_form(
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    quantity: Optional[str] = Form(None),
    shipping: Optional[str] = Form(None),
) -> ProductForm:
    """Collect the multipart text fields."""
    return ProductForm(
        name=name,
        description=description,
        price=price,
        category=category,
        quantity=quantity,
        shipping=shipping,
    )


async def photo_upload(photo: Optional[UploadFile] = File(None)) -> Optional[PhotoUpload]:
    """Read the uploaded photo, treating an empty upload as absent."""
    if photo is None:
        return None
    data = await photo.read()
    if not data:
        return None
    return PhotoUpload(data=data, content_type=photo.content_type or "application/octet-stream")


@router.post("/create-product", dependencies=[Depends(is_admin)])
async def create_product(
    form: ProductForm = Depends(product_form),
    photo: Optional[PhotoUpload] = Depends(photo_upload),
    service: IProductService = Depends(get_product_service),
):
    """Create a product. Admin only."""
    try:
        product = await service.create_product(form, photo)
    except InvalidIdError as e:
        logger.warning("Malformed category id in product form")
        return error_response(500, "Error in creating product", e)
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error in creating product")
        return error_response(500, "Error in creating product", e)

    return success_response(201, message="Product Created Successfully", products=product)


@router.put("/update-product/{pid}", dependencies=[Depends(is_admin)])
async def update_product(
    pid: str,
    form: ProductForm = Depends(product_form),
    photo: Optional[PhotoUpload] = Depends(photo_upload),
    service: IProductService = Depends(get_product_service),
):
    """Replace a product's fields and photo. Admin only."""
    try:
        product = await service.update_product(pid, form, photo)
    except InvalidIdError as e:
        logger.warning("Malformed id updating product %r", pid)
        return error_response(500, "Error in updating product", e)
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error in updating product")
        return error_response(500, "Error in updating product", e)

    return success_response(201, message="Product Updated Successfully", products=product)


@router.get("/get-product")
async def list_products(service: IProductService = Depends(get_product_service)):
    try:
        products = await service.get_products()
    except Exception as e:
        logger.exception("Error in getting products")
        return error_response(500, "Error in getting products", e)

    return success_response(
        200,
        counTotal=len(products),
        message="All Products: ",
        products=products,
    )


@router.get("/get-product/{slug}")
async def get_product(slug: str, service: IProductService = Depends(get_product_service)):
    try:
        product = await service.get_product(slug)
    except ProductNotFoundError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error while getting single product")
        return error_response(500, "Error while getting single product", e)

    return success_response(200, message="Single Product Fetched", product=product)


@router.get("/product-photo/{pid}")
async def get_photo(pid: str, service: IProductService = Depends(get_product_service)):
    """Serve the stored photo bytes with their content type."""
    try:
        photo = await service.get_photo(pid)
    except (ProductNotFoundError, PhotoNotAvailableError) as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error while getting photo")
        return error_response(500, "Error while getting photo", e)

    return Response(content=photo.data, media_type=photo.content_type)


@router.delete("/delete-product/{pid}", dependencies=[Depends(is_admin)])
async def delete_product(pid: str, service: IProductService = Depends(get_product_service)):
    """Delete a product. Admin only."""
    try:
        product = await service.delete_product(pid)
    except InvalidIdError as e:
        return error_response(400, "Invalid product ID format", e)
    except StorefrontError as e:
        return exception_response(e)
    except Exception as e:
        logger.exception("Error while deleting product")
        return error_response(500, "Error while deleting product", e)

    return success_response(200, message="Product deleted successfully", product=product)


@router.post("/product-filters")
async def filter_products(
    filters: Optional[ProductFilters] = None,
    service: IProductService = Depends(get_product_service),
):
    """Products in any of the checked categories and within the price range."""
    try:
        products = await service.filter_products(filters or ProductFilters())
    except Exception as e:
        logger.exception("Error while filtering products")
        return error_response(500, "Error while filtering products", e)

    return success_response(200, products=products)


@router.get("/product-count")
async def count_products(service: IProductService = Depends(get_product_service)):
    try:
        total = await service.count_products()
    except Exception as e:
        logger.exception("Error in product count")
        return error_response(500, "Error in product count", e)

    return success_response(200, total=total)


@router.get("/product-list/{page}")
async def list_page(page: int, service: IProductService = Depends(get_product_service)):
    try:
        products = await service.list_page(page)
    except Exception as e:
        logger.exception("error in per page ctrl")
        return error_response(500, "error in per page ctrl", e)

    return success_response(200, products=products)


@router.get("/search/{keyword}")
async def search_products(keyword: str, service: IProductService = Depends(get_product_service)):
    """Search names and descriptions; answers with a bare list."""
    try:
        products = await service.search_products(keyword)
    except Exception as e:
        logger.exception("Error In Search Product API")
        return error_response(400, "Error In Search Product API", e)

    return JSONResponse(content=products)


@router.get("/related-product/{pid}/{cid}")
async def related_products(
    pid: str,
    cid: str,
    service: IProductService = Depends(get_product_service),
):
    try:
        products = await service.related_products(pid, cid)
    except Exception as e:
        logger.exception("Error while getting related product")
        return error_response(500, "Error while getting related product", e)

    return success_response(200, products=products)


@router.get("/product-category/{slug}")
async def products_by_category(slug: str, service: IProductService = Depends(get_product_service)):
    try:
        category, products = await service.products_by_category(slug)
    except Exception as e:
        logger.exception("Error while getting products")
        return error_response(500, "Error while getting products", e)

    return success_response(200, category=category, products=products)
