"""Seed data loading service."""

import logging
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Table, func, insert, inspect, select
from sqlalchemy.orm import Mapper, Session

import rentaldb.models  # noqa: F401
from rentaldb.core.exceptions import SchemaNotInitializedError, SeedError
from rentaldb.database import Base
from rentaldb.schemas import (
    BookingCreate,
    CalendarEntryCreate,
    DescriptionCreate,
    GuestCreate,
    HostCreate,
    LocationCreate,
    LoyaltyProgramCreate,
    MaintenanceRequestCreate,
    MessageCreate,
    PaymentCreate,
    PromotionCreate,
    PropertyCreate,
    ReferralCreate,
    ReferralRewardCreate,
    ReviewCreate,
    ReviewFlagCreate,
    TransactionCreate,
    UserCreate,
)
from rentaldb.seed.data import SEED_TABLES

logger = logging.getLogger(__name__)

# Row schema used to validate and coerce each seed table
ROW_SCHEMAS: dict[str, type[BaseModel]] = {
    "Guest": GuestCreate,
    "Host": HostCreate,
    "Location": LocationCreate,
    "Property": PropertyCreate,
    "Booking": BookingCreate,
    "Payment": PaymentCreate,
    "Review": ReviewCreate,
    "Referral": ReferralCreate,
    "Message": MessageCreate,
    "Promotion": PromotionCreate,
    "MaintenanceRequest": MaintenanceRequestCreate,
    "Amenity": DescriptionCreate,
    "Type": DescriptionCreate,
    "Calendar": CalendarEntryCreate,
    "LoyaltyProgram": LoyaltyProgramCreate,
    "Rules": DescriptionCreate,
    "Transaction": TransactionCreate,
    "ReviewFlag": ReviewFlagCreate,
    "User": UserCreate,
    "ReferralReward": ReferralRewardCreate,
}


def mapper_for_table(table_name: str) -> Mapper:
    """Find the ORM mapper whose table is ``table_name``."""
    for mapper in Base.registry.mappers:
        if mapper.local_table.name == table_name:
            return mapper
    raise KeyError(table_name)


class SeedService:
    """Loads the sample rows into a freshly created schema."""

    def expected_counts(self) -> dict[str, int]:
        """Number of seed rows per table."""
        return {table_name: len(rows) for table_name, _, rows in SEED_TABLES}

    def build_seed_rows(self) -> list[tuple[Table, list[dict[str, Any]]]]:
        """Validate every seed row and key it by column name.

        Each row gets its 1-based position as primary key so that the
        foreign keys in the sample data line up.

        Returns:
            (table, rows) pairs in dependency order

        Raises:
            SeedError: If a row fails validation
        """
        result = []
        for table_name, columns, rows in SEED_TABLES:
            mapper = mapper_for_table(table_name)
            schema = ROW_SCHEMAS[table_name]
            pk_column = mapper.primary_key[0]

            records = []
            for position, row in enumerate(rows, start=1):
                try:
                    record = schema(**dict(zip(columns, row)))
                except PydanticValidationError as e:
                    raise SeedError(
                        f"Invalid seed row {position} for table {table_name}",
                        errors=e.errors(),
                    ) from e

                values = {pk_column.key: position}
                for attr, value in record.model_dump().items():
                    values[mapper.columns[attr].key] = value
                records.append(values)

            result.append((mapper.local_table, records))
        return result

    def load(self, db: Session) -> dict[str, int]:
        """Insert all seed rows in dependency order.

        The caller owns the transaction; nothing is committed here.

        Raises:
            SchemaNotInitializedError: If any seed table does not exist
            SeedError: If a seed table already holds rows
        """
        inspector = inspect(db.connection())
        missing = [name for name, _, _ in SEED_TABLES if not inspector.has_table(name)]
        if missing:
            raise SchemaNotInitializedError(missing)

        seed_rows = self.build_seed_rows()

        populated = [
            table.name
            for table, _ in seed_rows
            if db.execute(select(func.count()).select_from(table)).scalar()
        ]
        if populated:
            raise SeedError(
                f"Tables already contain rows: {', '.join(populated)}. "
                "Recreate the database before seeding."
            )

        counts = {}
        for table, rows in seed_rows:
            db.execute(insert(table), rows)
            counts[table.name] = len(rows)
            logger.info(f"Seeded {len(rows)} rows into {table.name}")

        db.flush()
        logger.info(f"Seed complete: {sum(counts.values())} rows across {len(counts)} tables")
        return counts

    def verify_counts(self, db: Session) -> dict[str, dict[str, int]]:
        """Compare table row counts with the seed data.

        Returns:
            Mismatched tables with expected and actual counts; empty if all match
        """
        mismatches = {}
        for table_name, expected in self.expected_counts().items():
            table = Base.metadata.tables[table_name]
            actual = db.execute(select(func.count()).select_from(table)).scalar() or 0
            if actual != expected:
                mismatches[table_name] = {"expected": expected, "actual": actual}
        return mismatches


seed_service = SeedService()
