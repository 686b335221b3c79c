from sqlalchemy import Column, Integer, Numeric, Text, text

from .database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    # 💰 two fractional digits; the store rounds on write
    price = Column(Numeric(10, 2), nullable=False, default=0, server_default=text("0.00"))

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"
