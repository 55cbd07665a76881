from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.database.database import Base


class ClientServiceEntity(Base):
    """Join row of the Client <-> Service many-to-many relationship."""
    __tablename__ = "cliente_servicios"

    client_id: Mapped[int] = mapped_column(
        "cliente_id",
        ForeignKey("clientes.id", ondelete="CASCADE", name="fk_cliente_servicios_cliente"),
        primary_key=True,
    )
    service_id: Mapped[int] = mapped_column(
        "servicio_id",
        ForeignKey("servicios.id", ondelete="CASCADE", name="fk_cliente_servicios_servicio"),
        primary_key=True,
        index=True,
    )

    client: Mapped["ClientEntity"] = relationship("ClientEntity", back_populates="service_links")
