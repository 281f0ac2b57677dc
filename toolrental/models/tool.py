"""ORM model exposing the tool catalogue to the rental core."""

from sqlalchemy import BigInteger, Column, Enum, Integer, Numeric, String, Text

from toolrental.core.database import Base
from toolrental.models.enums import ToolStatus


class Tool(Base):
    """A tool listed by its owner. Only ``owner_id`` matters to the rental core."""

    __tablename__ = "tools"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    type = Column(String(100), nullable=False)
    daily_price = Column(Numeric(10, 2), nullable=False)
    deposit_amount = Column(Numeric(10, 2), nullable=False, default=0)
    description = Column(Text, nullable=True)
    location = Column(String(200), nullable=True)
    owner_id = Column(BigInteger, nullable=False, index=True)
    status = Column(
        Enum(ToolStatus, name="tool_status"),
        nullable=False,
        default=ToolStatus.AVAILABLE,
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Tool(id={self.id}, name={self.name}, owner_id={self.owner_id})>"


__all__ = ["Tool"]
