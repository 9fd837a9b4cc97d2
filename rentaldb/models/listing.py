"""Property-related database models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, ForeignKey, Integer, Numeric, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rentaldb.database import Base

if TYPE_CHECKING:
    from rentaldb.models.booking import Booking
    from rentaldb.models.review import Review
    from rentaldb.models.user import Host


class Location(Base):
    """Where a property is located."""

    __tablename__ = "Location"

    id: Mapped[int] = mapped_column("LocationID", Integer, primary_key=True, autoincrement=True)
    city: Mapped[str] = mapped_column("City", String(100), nullable=False)
    state: Mapped[str | None] = mapped_column("State", String(100))
    country: Mapped[str] = mapped_column("Country", String(100), nullable=False)

    properties: Mapped[list["Property"]] = relationship("Property", back_populates="location")


class Property(Base):
    """Property listed by a host."""

    __tablename__ = "Property"

    id: Mapped[int] = mapped_column("PropertyID", Integer, primary_key=True, autoincrement=True)
    host_id: Mapped[int | None] = mapped_column("HostID", Integer, ForeignKey("Host.HostID"))
    location_id: Mapped[int | None] = mapped_column(
        "LocationID", Integer, ForeignKey("Location.LocationID")
    )
    price: Mapped[Decimal] = mapped_column("Price", Numeric(10, 2), nullable=False)  # per night
    property_type: Mapped[str | None] = mapped_column("Type", String(100))
    amenities: Mapped[str | None] = mapped_column("Amenities", Text)
    rules: Mapped[str | None] = mapped_column("Rules", Text)
    availability: Mapped[bool | None] = mapped_column(
        "Availability", Boolean, default=True, server_default=true()
    )

    # Relationships
    host: Mapped["Host | None"] = relationship("Host", back_populates="properties")
    location: Mapped["Location | None"] = relationship("Location", back_populates="properties")
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="property")
    reviews: Mapped[list["Review"]] = relationship("Review", back_populates="property")
    calendar_entries: Mapped[list["CalendarEntry"]] = relationship(
        "CalendarEntry", back_populates="property"
    )
    maintenance_requests: Mapped[list["MaintenanceRequest"]] = relationship(
        "MaintenanceRequest", back_populates="property"
    )
    promotions: Mapped[list["Promotion"]] = relationship("Promotion", back_populates="property")


class CalendarEntry(Base):
    """Per-date availability flag for a property.

    (PropertyID, Date) is not unique; duplicates are reported by the
    integrity checks rather than rejected.
    """

    __tablename__ = "Calendar"

    id: Mapped[int] = mapped_column("CalendarID", Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[int | None] = mapped_column(
        "PropertyID", Integer, ForeignKey("Property.PropertyID")
    )
    calendar_date: Mapped[date] = mapped_column("Date", Date, nullable=False)
    availability: Mapped[bool | None] = mapped_column(
        "Availability", Boolean, default=True, server_default=true()
    )

    property: Mapped["Property | None"] = relationship("Property", back_populates="calendar_entries")


class MaintenanceRequest(Base):
    """Maintenance request raised for a property."""

    __tablename__ = "MaintenanceRequest"

    id: Mapped[int] = mapped_column("RequestID", Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[int | None] = mapped_column(
        "PropertyID", Integer, ForeignKey("Property.PropertyID")
    )
    request_date: Mapped[date] = mapped_column("RequestDate", Date, nullable=False)
    status: Mapped[str | None] = mapped_column("Status", String(50))  # Pending, In Progress, Resolved
    description: Mapped[str | None] = mapped_column("Description", Text)

    property: Mapped["Property | None"] = relationship(
        "Property", back_populates="maintenance_requests"
    )


class Promotion(Base):
    """Discount offered by a host on a property."""

    __tablename__ = "Promotion"

    id: Mapped[int] = mapped_column("PromoID", Integer, primary_key=True, autoincrement=True)
    host_id: Mapped[int | None] = mapped_column("HostID", Integer, ForeignKey("Host.HostID"))
    property_id: Mapped[int | None] = mapped_column(
        "PropertyID", Integer, ForeignKey("Property.PropertyID")
    )
    discount_rate: Mapped[Decimal | None] = mapped_column("DiscountRate", Numeric(5, 2))
    start_date: Mapped[date] = mapped_column("StartDate", Date, nullable=False)
    end_date: Mapped[date] = mapped_column("EndDate", Date, nullable=False)

    host: Mapped["Host | None"] = relationship("Host", back_populates="promotions")
    property: Mapped["Property | None"] = relationship("Property", back_populates="promotions")


class Amenity(Base):
    """Amenity lookup (e.g. Swimming Pool, WiFi)."""

    __tablename__ = "Amenity"

    id: Mapped[int] = mapped_column("AmenityID", Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column("Description", Text, nullable=False)


class PropertyType(Base):
    """Property type lookup (e.g. Apartment, Villa)."""

    __tablename__ = "Type"

    id: Mapped[int] = mapped_column("TypeID", Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column("Description", Text, nullable=False)


class Rule(Base):
    """House rule lookup (e.g. No smoking)."""

    __tablename__ = "Rules"

    id: Mapped[int] = mapped_column("RuleID", Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column("Description", Text, nullable=False)
