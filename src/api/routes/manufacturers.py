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
    MANUFACTURERS,
    CreateCatalogItemUseCase,
    DeleteCatalogItemUseCase,
    GetCatalogItemUseCase,
    ListCatalogUseCase,
    ManufacturerCommand,
    UpdateCatalogItemUseCase,
)
from src.depends import get_file_storage, get_unit_of_work, require_roles
from src.domain.entities import RoleNumber

router = APIRouter(prefix="/manufacturers", tags=["Manufacturers"])

admin_only = require_roles(RoleNumber.ADMIN)


@router.get("", status_code=status.HTTP_200_OK)
async def list_manufacturers(
    query: ListQuery = Depends(base_list_params),
    tools: Optional[List[UUID]] = Query(None, description="Manufacturers making any of these tools"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    query.filters["tools"] = tools
    result = await ListCatalogUseCase(uow, MANUFACTURERS).execute(query)
    if result.is_err():
        raise ApiError(result.error)

    return success({"manufacturers": result.value})


@router.get("/{manufacturer_id}", status_code=status.HTTP_200_OK)
async def get_manufacturer(manufacturer_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetCatalogItemUseCase(uow, MANUFACTURERS).execute(manufacturer_id)
    if result.is_err():
        raise ApiError(result.error)

    return success({"manufacturer": result.value})


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_manufacturer(
    name: str = Form(..., min_length=1),
    description: str = Form(..., min_length=1),
    tools: Optional[str] = Form(None, description="JSON encoded list of tool ids"),
    logo: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    command = ManufacturerCommand(name=name, description=description, tools=tools)
    files = await read_uploads(logo=logo)

    result = await CreateCatalogItemUseCase(uow, MANUFACTURERS, storage).execute(
        command, account.id, files
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"manufacturer": result.value})


@router.put("/{manufacturer_id}", status_code=status.HTTP_200_OK)
async def update_manufacturer(
    manufacturer_id: UUID,
    name: str = Form(..., min_length=1),
    description: str = Form(..., min_length=1),
    tools: str = Form(..., description="JSON encoded list of tool ids"),
    logo: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    """
    Update manufacturer (ADMIN)

    tools replaces the whole tool list.
    """
    command = ManufacturerCommand(name=name, description=description, tools=tools)
    files = await read_uploads(logo=logo)

    result = await UpdateCatalogItemUseCase(uow, MANUFACTURERS, storage).execute(
        manufacturer_id, command, account.id, files
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"manufacturer": result.value})


@router.delete("/{manufacturer_id}", status_code=status.HTTP_200_OK)
async def delete_manufacturer(
    manufacturer_id: UUID,
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCatalogItemUseCase(uow, MANUFACTURERS).execute(
        manufacturer_id, account.id
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"manufacturer": result.value})
