from functools import partial
from uuid import UUID

from strawberry.dataloader import DataLoader

from ..database import Database
from ..dbmodels import Artists, Base, Masters, Users
from ..repository import collection


async def load_rows(database: Database, model: type[Base], keys: list[UUID]) -> list:
    """Batch load rows of ``model`` by ID."""
    async with database.session() as session:
        return await collection.load_by_ids(session, model, keys)


class Loaders:
    """Per-request batch loaders for the to-one relations of albums and masters."""

    def __init__(self, database: Database):
        self.artist_loader: DataLoader[UUID, Artists | None] = DataLoader(
            load_fn=partial(load_rows, database, Artists)
        )
        self.master_loader: DataLoader[UUID, Masters | None] = DataLoader(
            load_fn=partial(load_rows, database, Masters)
        )
        self.user_loader: DataLoader[UUID, Users | None] = DataLoader(
            load_fn=partial(load_rows, database, Users)
        )
