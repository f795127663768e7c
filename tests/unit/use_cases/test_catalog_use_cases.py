import json
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.repositories.pagination import ListQuery, Page
from src.app.use_cases.catalog import (
    MANUFACTURERS,
    PRODUCTS,
    TECHNIQUES,
    TOOLS,
    CatalogResource,
    CreateCatalogItemUseCase,
    DeleteCatalogItemUseCase,
    FileUpload,
    GetCatalogItemUseCase,
    ListCatalogUseCase,
    ManufacturerCommand,
    ProductCommand,
    ToolCommand,
    UpdateCatalogItemUseCase,
)
from src.domain.entities import FileField, Manufacturer, Product, Tool
from src.libs.result import Error, ErrorKind, Return


@pytest.fixture
def storage():
    storage = MagicMock()
    storage.save = AsyncMock(
        side_effect=lambda folder, name, content: Return.ok(f"http://test/public/{folder}/{name}")
    )
    return storage


@pytest.fixture
def actor_id():
    return uuid4()


def png(name="drill.png"):
    return FileUpload(filename=name, content_type="image/png", content=b"\x89PNG", size=4)


def make_tool(**overrides):
    values = dict(id=uuid4(), name="Drill", description="Rotary drill", information_links=[])
    values.update(overrides)
    return Tool(**values)


@pytest.mark.asyncio
async def test_create_tool_stamps_creator_and_parses_links(mock_uow, storage, actor_id):
    links = [{"name": "Wiki", "url": "https://example.com/drill"}]
    command = ToolCommand(name="Drill", description="Rotary drill", information_links=json.dumps(links))

    result = await CreateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(command, actor_id)

    assert result.is_ok()
    assert result.value.name == "Drill"
    assert result.value.information_links == links
    assert result.value.created_by == actor_id
    mock_uow.commit.assert_awaited_once()
    storage.save.assert_not_called()


@pytest.mark.asyncio
async def test_create_tool_with_photo(mock_uow, storage, actor_id):
    command = ToolCommand(name="Drill", description="Rotary drill")

    result = await CreateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        command, actor_id, {FileField.photo: png()}
    )

    assert result.is_ok()
    photo = result.value.photo
    assert photo["name"] == "drill.png"
    assert photo["mimetype"] == "image/png"
    assert photo["size"] == 4
    folder, file_name, _ = storage.save.call_args.args
    assert folder == "tools"
    assert file_name.startswith(f"{result.value.id}_photo_")
    assert file_name.endswith(".png")
    assert photo["url"] == f"http://test/public/tools/{file_name}"


@pytest.mark.asyncio
async def test_create_rejects_duplicate_name(mock_uow, storage, actor_id):
    mock_uow.tools.exists_by_name.return_value = True

    result = await CreateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        ToolCommand(name="Drill", description="Rotary drill"), actor_id
    )

    assert result.is_err()
    assert result.error.code == "TOOL_ALREADY_EXISTS"
    assert result.error.kind == ErrorKind.conflict
    mock_uow.tools.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_rejects_invalid_json(mock_uow, storage, actor_id):
    result = await CreateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        ToolCommand(name="Drill", description="Rotary drill", information_links="[not json"),
        actor_id,
    )

    assert result.is_err()
    assert result.error.code == "INVALID_JSON"
    assert result.error.kind == ErrorKind.validation


@pytest.mark.asyncio
async def test_create_rejects_wrong_file_type_before_writing(mock_uow, storage, actor_id):
    gif = FileUpload(filename="a.gif", content_type="image/gif", content=b"GIF", size=3)

    result = await CreateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        ToolCommand(name="Drill", description="Rotary drill"), actor_id, {FileField.photo: gif}
    )

    assert result.is_err()
    assert result.error.code == "WRONG_FILE_TYPE"
    mock_uow.tools.create.assert_not_called()
    storage.save.assert_not_called()


@pytest.mark.asyncio
async def test_create_upload_failure_commits_nothing(mock_uow, storage, actor_id):
    storage.save.side_effect = None
    storage.save.return_value = Return.err(
        Error("UPLOAD_FAILED", "Failed to upload file!", ErrorKind.internal)
    )

    result = await CreateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        ToolCommand(name="Drill", description="Rotary drill"), actor_id, {FileField.photo: png()}
    )

    assert result.is_err()
    assert result.error.message == "Failed to upload photo!"
    assert result.error.kind == ErrorKind.internal
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_manufacturer_links_tools(mock_uow, storage, actor_id):
    tool = make_tool()
    mock_uow.tools.get_by_ids.return_value = [tool]
    mock_uow.manufacturers.get_tool_ids.return_value = [tool.id]

    command = ManufacturerCommand(name="Acme", description="Tools", tools=json.dumps([str(tool.id)]))
    result = await CreateCatalogItemUseCase(mock_uow, MANUFACTURERS, storage).execute(
        command, actor_id
    )

    assert result.is_ok()
    manufacturer_id = result.value.id
    mock_uow.manufacturers.replace_tools.assert_awaited_once_with(manufacturer_id, [tool.id])
    assert [t.id for t in result.value.tools] == [tool.id]


@pytest.mark.asyncio
async def test_create_manufacturer_with_unknown_tool(mock_uow, storage, actor_id):
    command = ManufacturerCommand(name="Acme", description="Tools", tools=json.dumps([str(uuid4())]))

    result = await CreateCatalogItemUseCase(mock_uow, MANUFACTURERS, storage).execute(
        command, actor_id
    )

    assert result.is_err()
    assert result.error.code == "TOOL_NOT_FOUND"
    assert result.error.kind == ErrorKind.not_found
    mock_uow.manufacturers.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_product_with_unknown_manufacturer(mock_uow, storage, actor_id):
    command = ProductCommand(
        name="Hammer X", short_description="Hammer", manufacturer=uuid4(), type=uuid4()
    )

    result = await CreateCatalogItemUseCase(mock_uow, PRODUCTS, storage).execute(
        command, actor_id
    )

    assert result.is_err()
    assert result.error.code == "MANUFACTURER_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_product_embeds_references(mock_uow, storage, actor_id):
    manufacturer = Manufacturer(id=uuid4(), name="Acme", description="Tools")
    tool = make_tool()
    mock_uow.manufacturers.get_by_id.return_value = manufacturer
    mock_uow.tools.get_by_id.return_value = tool
    mock_uow.manufacturers.get_by_ids.return_value = [manufacturer]
    mock_uow.tools.get_by_ids.return_value = [tool]

    command = ProductCommand(
        name="Hammer X",
        short_description="Hammer",
        details=json.dumps([{"weight": "1kg"}]),
        manufacturer=manufacturer.id,
        type=tool.id,
    )
    result = await CreateCatalogItemUseCase(mock_uow, PRODUCTS, storage).execute(
        command, actor_id
    )

    assert result.is_ok()
    assert result.value.manufacturer.name == "Acme"
    assert result.value.type.name == "Drill"
    assert result.value.details == [{"weight": "1kg"}]


@pytest.mark.asyncio
async def test_update_missing_item(mock_uow, storage, actor_id):
    result = await UpdateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        uuid4(), ToolCommand(name="Drill", description="x"), actor_id
    )

    assert result.is_err()
    assert result.error.code == "TOOL_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_rejects_name_of_another_item(mock_uow, storage, actor_id):
    mock_uow.tools.get_by_id.return_value = make_tool()
    mock_uow.tools.exists_by_name.return_value = True

    result = await UpdateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        uuid4(), ToolCommand(name="Saw", description="x"), actor_id
    )

    assert result.is_err()
    assert result.error.kind == ErrorKind.conflict


@pytest.mark.asyncio
async def test_update_same_file_name_is_not_uploaded_again(mock_uow, storage, actor_id):
    tool = make_tool(photo={"url": "http://test/public/tools/x.png", "name": "drill.png"})
    mock_uow.tools.get_by_id.return_value = tool

    result = await UpdateCatalogItemUseCase(mock_uow, TOOLS, storage).execute(
        tool.id,
        ToolCommand(name="Drill", description="Updated"),
        actor_id,
        {FileField.photo: png("drill.png")},
    )

    assert result.is_ok()
    storage.save.assert_not_called()
    assert result.value.description == "Updated"
    assert result.value.last_edit_by == actor_id
    mock_uow.tools.exists_by_name.assert_not_called()


@pytest.mark.asyncio
async def test_update_product_clears_files_marked_for_deletion(mock_uow, storage, actor_id):
    product = Product(
        id=uuid4(),
        name="Hammer X",
        short_description="Hammer",
        photo={"url": "u", "name": "p.png", "mimetype": "image/png", "size": 1},
        video={"url": "v", "name": "v.mp4", "mimetype": "video/mp4", "size": 1},
        details=[],
        information_links=[],
        manufacturer_id=uuid4(),
        tool_id=uuid4(),
    )
    mock_uow.products.get_by_id.return_value = product
    mock_uow.manufacturers.get_by_id.return_value = Manufacturer(
        id=product.manufacturer_id, name="Acme", description="d"
    )
    mock_uow.tools.get_by_id.return_value = make_tool(id=product.tool_id)

    command = ProductCommand(
        name="Hammer X",
        short_description="Hammer",
        manufacturer=product.manufacturer_id,
        type=product.tool_id,
        to_be_deleted=json.dumps({"photo": True}),
    )
    result = await UpdateCatalogItemUseCase(mock_uow, PRODUCTS, storage).execute(
        product.id, command, actor_id
    )

    assert result.is_ok()
    assert result.value.photo is None
    assert result.value.video is not None


@pytest.mark.asyncio
async def test_delete_is_soft(mock_uow, actor_id):
    tool = make_tool()
    mock_uow.tools.get_by_id.return_value = tool

    result = await DeleteCatalogItemUseCase(mock_uow, TOOLS).execute(tool.id, actor_id)

    assert result.is_ok()
    assert result.value.is_deleted is True
    assert tool.last_edit_by == actor_id
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_missing_item(mock_uow):
    result = await GetCatalogItemUseCase(mock_uow, TOOLS).execute(uuid4())

    assert result.is_err()
    assert result.error.kind == ErrorKind.not_found


@pytest.mark.asyncio
async def test_list_renders_page_docs(mock_uow):
    tool = make_tool()
    mock_uow.tools.paginate.return_value = Page.build([tool], total_docs=1, page=1, limit=10)

    result = await ListCatalogUseCase(mock_uow, TOOLS).execute(ListQuery())

    assert result.is_ok()
    assert result.value.total_docs == 1
    assert result.value.docs[0].id == tool.id
    assert result.value.has_next_page is False


def test_catalog_resource_is_abstract():
    with pytest.raises(TypeError):
        CatalogResource()


def test_each_resource_declares_its_upload_slots():
    assert set(TOOLS.file_fields) == {FileField.photo}
    assert set(TECHNIQUES.file_fields) == {FileField.photo}
    assert set(MANUFACTURERS.file_fields) == {FileField.logo}
    assert set(PRODUCTS.file_fields) == {FileField.photo, FileField.video}
    assert "file_fields" not in vars(CatalogResource)
