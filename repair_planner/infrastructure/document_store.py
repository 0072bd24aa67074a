"""
MongoDB Document Store

Technicians, parts inventory and work orders live in three collections of
one database. Reads are snapshots; the planner only ever inserts new work
orders.
"""

import logging
import re
from typing import Any, Iterable, Optional

from pymongo import ASCENDING, DESCENDING, AsyncMongoClient
from pymongo.errors import PyMongoError

from repair_planner.domain.models import Part, Technician, WorkOrder
from repair_planner.domain.work_order_defaults import ensure_identity
from repair_planner.infrastructure.config import MongoConfig

logger = logging.getLogger(__name__)

# Never return Mongo's internal key; documents carry their own "id"
PROJECTION = {"_id": False}


def normalize_terms(values: Iterable[str]) -> list[str]:
    """Trim, drop blanks and collapse case-insensitive duplicates, keeping order."""
    seen = set()
    terms = []
    for value in values:
        if not value or not value.strip():
            continue
        term = value.strip()
        if term.lower() in seen:
            continue
        seen.add(term.lower())
        terms.append(term)
    return terms


def exact_match_ignore_case(value: str) -> re.Pattern:
    return re.compile(f"^{re.escape(value)}$", re.IGNORECASE)


def technicians_filter(required_skills: Iterable[str]) -> dict[str, Any]:
    """Available technicians holding every required skill."""
    query: dict[str, Any] = {"isAvailable": True}
    skills = normalize_terms(required_skills)
    if skills:
        query["$and"] = [{"skills": exact_match_ignore_case(skill)} for skill in skills]
    return query


def parts_filter(part_numbers: Iterable[str]) -> dict[str, Any]:
    """Inventory rows whose part number is in the given set."""
    return {
        "partNumber": {
            "$in": [exact_match_ignore_case(number) for number in normalize_terms(part_numbers)]
        }
    }


class MongoDocumentStore:
    """
    Document store backed by MongoDB (pymongo async API).

    Work orders are keyed by their id (_id) and indexed by status.
    """

    def __init__(self, database: Any, config: Optional[MongoConfig] = None, client: Any = None):
        self.config = config or MongoConfig()
        self.database = database
        self._client = client
        self._technicians = database[self.config.technicians_collection]
        self._parts = database[self.config.parts_collection]
        self._work_orders = database[self.config.work_orders_collection]

    @classmethod
    def from_config(cls, config: MongoConfig) -> "MongoDocumentStore":
        client = AsyncMongoClient(config.uri, tz_aware=True)
        return cls(client[config.database], config, client=client)

    async def ensure_indexes(self) -> None:
        """Create supporting indexes. Idempotent."""
        try:
            await self._technicians.create_index([("isAvailable", ASCENDING), ("skills", ASCENDING)])
            await self._parts.create_index([("partNumber", ASCENDING)])
            await self._work_orders.create_index([("status", ASCENDING), ("createdAtUtc", DESCENDING)])
            await self._work_orders.create_index([("workOrderNumber", ASCENDING)])
        except PyMongoError:
            logger.exception("Failed to create indexes in MongoDB.")
            raise

    async def get_available_technicians(self, required_skills: Iterable[str]) -> list[Technician]:
        """
        Find available technicians that hold all required skills.

        Args:
            required_skills: Skill tags, matched case-insensitively

        Returns:
            Matching technicians (any order)
        """
        query = technicians_filter(required_skills)
        try:
            technicians = [
                Technician.from_document(document)
                async for document in self._technicians.find(query, PROJECTION)
            ]
        except PyMongoError:
            logger.exception("Failed to query technicians from MongoDB.")
            raise

        logger.info("Found %d available technicians matching skills.", len(technicians))
        return technicians

    async def get_parts_inventory(self, part_numbers: Iterable[str]) -> list[Part]:
        """
        Fetch inventory rows for the given part numbers.

        An empty (or all-blank) list returns [] without querying.
        """
        numbers = normalize_terms(part_numbers)
        if not numbers:
            return []

        try:
            parts = [
                Part.from_document(document)
                async for document in self._parts.find(parts_filter(numbers), PROJECTION)
            ]
        except PyMongoError:
            logger.exception("Failed to query parts inventory from MongoDB.")
            raise

        logger.info("Fetched %d parts.", len(parts))
        return parts

    async def create_work_order(self, work_order: WorkOrder) -> WorkOrder:
        """
        Insert a new work order document.

        Identity and timestamp defaults are re-applied here so the store
        never writes an order without an id or number.

        Returns:
            The work order as stored
        """
        ensure_identity(work_order)
        document = work_order.to_document()
        document["_id"] = work_order.id

        try:
            await self._work_orders.insert_one(document)
            stored = await self._work_orders.find_one({"_id": work_order.id}, PROJECTION)
        except PyMongoError:
            logger.exception("Failed to create work order in MongoDB.")
            raise

        logger.info(
            "Created work order %s with status %s.", work_order.id, work_order.status
        )
        if stored is None:
            return work_order
        return WorkOrder.from_document(stored)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()


def create_document_store(config: MongoConfig) -> MongoDocumentStore:
    """Factory function to create the MongoDB document store."""
    return MongoDocumentStore.from_config(config)
