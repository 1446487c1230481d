import logging

from bookshelf.database import Database

logger = logging.getLogger(__name__)


class SchemaService:
    def __init__(self, database: Database):
        self.database = database

    def sync(self) -> None:
        """Drop every table and create them again. All rows are lost."""
        logger.warning("Dropping and recreating all tables")
        self.database.sync()
