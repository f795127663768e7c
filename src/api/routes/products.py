from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from src.api.error import ApiError
from src.api.utils.listing import base_list_params
from src.api.utils.response import success
from src.api.utils.uploads import read_uploads
from src.app.repositories.pagination import ListQuery
from src.app.services.file_storage import IFileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import CurrentAccount
from src.app.use_cases.catalog import (
    PRODUCTS,
    CreateCatalogItemUseCase,
    DeleteCatalogItemUseCase,
    GetCatalogItemUseCase,
    ListCatalogUseCase,
    ProductCommand,
    UpdateCatalogItemUseCase,
)
from src.depends import get_file_storage, get_unit_of_work, require_roles
from src.domain.entities import RoleNumber

router = APIRouter(prefix="/products", tags=["Products"])

admin_only = require_roles(RoleNumber.ADMIN)


@router.get("", status_code=status.HTTP_200_OK)
async def list_products(
    query: ListQuery = Depends(base_list_params),
    type: Optional[List[UUID]] = Query(None, description="Products of any of these tools"),
    manufacturer: Optional[List[UUID]] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    query.filters["type"] = type
    query.filters["manufacturer"] = manufacturer
    result = await ListCatalogUseCase(uow, PRODUCTS).execute(query)
    if result.is_err():
        raise ApiError(result.error)

    return success({"products": result.value})


@router.get("/{product_id}", status_code=status.HTTP_200_OK)
async def get_product(product_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetCatalogItemUseCase(uow, PRODUCTS).execute(product_id)
    if result.is_err():
        raise ApiError(result.error)

    return success({"product": result.value})


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    name: str = Form(..., min_length=1),
    short_description: str = Form(..., min_length=1),
    long_description: Optional[str] = Form(None),
    details: Optional[str] = Form(None, description="JSON encoded list"),
    information_links: Optional[str] = Form(None, description="JSON encoded list"),
    manufacturer: UUID = Form(...),
    type: UUID = Form(..., description="Tool id"),
    photo: Optional[UploadFile] = File(None),
    video: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    command = ProductCommand(
        name=name,
        short_description=short_description,
        long_description=long_description,
        details=details,
        information_links=information_links,
        manufacturer=manufacturer,
        type=type,
    )
    files = await read_uploads(photo=photo, video=video)

    result = await CreateCatalogItemUseCase(uow, PRODUCTS, storage).execute(
        command, account.id, files
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"product": result.value})


@router.put("/{product_id}", status_code=status.HTTP_200_OK)
async def update_product(
    product_id: UUID,
    name: str = Form(..., min_length=1),
    short_description: str = Form(..., min_length=1),
    long_description: Optional[str] = Form(None),
    details: Optional[str] = Form(None),
    information_links: Optional[str] = Form(None),
    manufacturer: UUID = Form(...),
    type: UUID = Form(...),
    to_be_deleted: Optional[str] = Form(None, description='e.g. {"photo": true}'),
    photo: Optional[UploadFile] = File(None),
    video: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    """
    Update product (ADMIN)

    to_be_deleted clears the named file slots before new uploads are stored.
    """
    command = ProductCommand(
        name=name,
        short_description=short_description,
        long_description=long_description,
        details=details,
        information_links=information_links,
        manufacturer=manufacturer,
        type=type,
        to_be_deleted=to_be_deleted,
    )
    files = await read_uploads(photo=photo, video=video)

    result = await UpdateCatalogItemUseCase(uow, PRODUCTS, storage).execute(
        product_id, command, account.id, files
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"product": result.value})


@router.delete("/{product_id}", status_code=status.HTTP_200_OK)
async def delete_product(
    product_id: UUID,
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCatalogItemUseCase(uow, PRODUCTS).execute(product_id, account.id)
    if result.is_err():
        raise ApiError(result.error)

    return success({"product": result.value})
