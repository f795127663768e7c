from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from src.api.error import ApiError
from src.api.utils.listing import base_list_params
from src.api.utils.response import success
from src.api.utils.uploads import read_uploads
from src.app.repositories.pagination import ListQuery
from src.app.services.file_storage import IFileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import CurrentAccount
from src.app.use_cases.catalog import (
    TOOLS,
    CreateCatalogItemUseCase,
    DeleteCatalogItemUseCase,
    GetCatalogItemUseCase,
    ListCatalogUseCase,
    ToolCommand,
    UpdateCatalogItemUseCase,
)
from src.depends import get_file_storage, get_unit_of_work, require_roles
from src.domain.entities import RoleNumber

router = APIRouter(prefix="/tools", tags=["Tools"])

admin_only = require_roles(RoleNumber.ADMIN)


@router.get("", status_code=status.HTTP_200_OK)
async def list_tools(
    query: ListQuery = Depends(base_list_params),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCatalogUseCase(uow, TOOLS).execute(query)
    if result.is_err():
        raise ApiError(result.error)

    return success({"tools": result.value})


@router.get("/{tool_id}", status_code=status.HTTP_200_OK)
async def get_tool(tool_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetCatalogItemUseCase(uow, TOOLS).execute(tool_id)
    if result.is_err():
        raise ApiError(result.error)

    return success({"tool": result.value})


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tool(
    name: str = Form(..., min_length=1),
    description: str = Form(..., min_length=1),
    information_links: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    """
    Create tool (ADMIN)

    information_links is a JSON encoded list.
    """
    command = ToolCommand(name=name, description=description, information_links=information_links)
    files = await read_uploads(photo=photo)

    result = await CreateCatalogItemUseCase(uow, TOOLS, storage).execute(command, account.id, files)
    if result.is_err():
        raise ApiError(result.error)

    return success({"tool": result.value})


@router.put("/{tool_id}", status_code=status.HTTP_200_OK)
async def update_tool(
    tool_id: UUID,
    name: str = Form(..., min_length=1),
    description: str = Form(..., min_length=1),
    information_links: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    command = ToolCommand(name=name, description=description, information_links=information_links)
    files = await read_uploads(photo=photo)

    result = await UpdateCatalogItemUseCase(uow, TOOLS, storage).execute(
        tool_id, command, account.id, files
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"tool": result.value})


@router.delete("/{tool_id}", status_code=status.HTTP_200_OK)
async def delete_tool(
    tool_id: UUID,
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCatalogItemUseCase(uow, TOOLS).execute(tool_id, account.id)
    if result.is_err():
        raise ApiError(result.error)

    return success({"tool": result.value})
