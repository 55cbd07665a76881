from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.database.database import Base


class ServiceEntity(Base):
    """SQLAlchemy model for the servicios table."""
    __tablename__ = "servicios"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nombre_servicio", String(255), nullable=False)
    description: Mapped[str | None] = mapped_column("descripcion", String(255), nullable=True)

    # Reverse navigation only; never mapped into API payloads.
    # Join rows are removed by the database (ON DELETE CASCADE) when a service goes away.
    clients: Mapped[list["ClientEntity"]] = relationship(
        "ClientEntity",
        secondary="cliente_servicios",
        viewonly=True,
    )
