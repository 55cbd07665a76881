from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.database.database import Base


class ClientEntity(Base):
    """SQLAlchemy model for the clientes table."""
    __tablename__ = "clientes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nombre_cliente", String(255), nullable=False)
    email: Mapped[str] = mapped_column("correo", String(255), nullable=False)

    # Owning side of the many-to-many: join rows are written through this collection
    service_links: Mapped[list["ClientServiceEntity"]] = relationship(
        "ClientServiceEntity",
        back_populates="client",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Read-only navigation used for eager loading the associated services
    services: Mapped[list["ServiceEntity"]] = relationship(
        "ServiceEntity",
        secondary="cliente_servicios",
        viewonly=True,
        order_by="ServiceEntity.id",
    )
