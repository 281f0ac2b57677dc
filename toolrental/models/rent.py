from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Text,
    func,
)

from toolrental.core.database import Base
from toolrental.models.enums import RentStatus


class Rent(Base):
    """A reservation of a tool by a renter over ``[start_date, end_date)``."""

    __tablename__ = "rents"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    tool_id = Column(BigInteger, ForeignKey("tools.id"), nullable=False, index=True)
    user_id = Column(BigInteger, nullable=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    # No column default: the status is always chosen explicitly by the caller.
    status = Column(Enum(RentStatus, name="rent_status"), nullable=False)
    message = Column(Text, nullable=True)
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return (
            f"<Rent(id={self.id}, tool_id={self.tool_id}, status={self.status}, "
            f"start_date={self.start_date}, end_date={self.end_date})>"
        )


__all__ = ["Rent"]
