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
    TECHNIQUES,
    CreateCatalogItemUseCase,
    DeleteCatalogItemUseCase,
    GetCatalogItemUseCase,
    ListCatalogUseCase,
    TechniqueCommand,
    UpdateCatalogItemUseCase,
)
from src.depends import get_file_storage, get_unit_of_work, require_roles
from src.domain.entities import RoleNumber

router = APIRouter(prefix="/techniques", tags=["Techniques"])

admin_only = require_roles(RoleNumber.ADMIN)


@router.get("", status_code=status.HTTP_200_OK)
async def list_techniques(
    query: ListQuery = Depends(base_list_params),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCatalogUseCase(uow, TECHNIQUES).execute(query)
    if result.is_err():
        raise ApiError(result.error)

    return success({"techniques": result.value})


@router.get("/{technique_id}", status_code=status.HTTP_200_OK)
async def get_technique(technique_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetCatalogItemUseCase(uow, TECHNIQUES).execute(technique_id)
    if result.is_err():
        raise ApiError(result.error)

    return success({"technique": result.value})


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_technique(
    name: str = Form(..., min_length=1),
    description: str = Form(..., min_length=1),
    acronym: str = Form(..., min_length=1),
    information_links: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    command = TechniqueCommand(
        name=name,
        description=description,
        acronym=acronym,
        information_links=information_links,
    )
    files = await read_uploads(photo=photo)

    result = await CreateCatalogItemUseCase(uow, TECHNIQUES, storage).execute(
        command, account.id, files
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"technique": result.value})


@router.put("/{technique_id}", status_code=status.HTTP_200_OK)
async def update_technique(
    technique_id: UUID,
    name: str = Form(..., min_length=1),
    description: str = Form(..., min_length=1),
    acronym: str = Form(..., min_length=1),
    information_links: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IFileStorage = Depends(get_file_storage),
):
    command = TechniqueCommand(
        name=name,
        description=description,
        acronym=acronym,
        information_links=information_links,
    )
    files = await read_uploads(photo=photo)

    result = await UpdateCatalogItemUseCase(uow, TECHNIQUES, storage).execute(
        technique_id, command, account.id, files
    )
    if result.is_err():
        raise ApiError(result.error)

    return success({"technique": result.value})


@router.delete("/{technique_id}", status_code=status.HTTP_200_OK)
async def delete_technique(
    technique_id: UUID,
    account: CurrentAccount = Depends(admin_only),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCatalogItemUseCase(uow, TECHNIQUES).execute(technique_id, account.id)
    if result.is_err():
        raise ApiError(result.error)

    return success({"technique": result.value})
