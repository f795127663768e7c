from src.app.repositories.pagination import ListQuery, Page
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .resources import CatalogResource


class ListCatalogUseCase:
    """
    Lists a catalog resource one page at a time.

    Business Rules:
    - Active, non-deleted rows by default; active/deleted flags override
    - name matches case-insensitively anywhere in the name
    - Newest first
    """

    def __init__(self, uow: UnitOfWork, resource: CatalogResource):
        self.uow = uow
        self.resource = resource

    async def execute(self, query: ListQuery) -> Result[Page]:
        async with self.uow:
            page = await self.resource.repository(self.uow).paginate(query)
            docs = await self.resource.render_many(self.uow, page.docs)
            return Return.ok(page.model_copy(update={"docs": docs}))
