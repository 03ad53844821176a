# essence_orders/data/seed.py
from decimal import Decimal

from essence_orders.data.database import Base, SessionLocal, engine
from essence_orders.data.models import AddressModel, CustomerModel, ProductModel

PERFUMES = [
    ("P1", "Noir Absolu Extrait 50ml", Decimal("120.00"), 8),
    ("P2", "Fleur de Sel Eau de Toilette 100ml", Decimal("15.00"), 25),
    ("P3", "Ambre Royal Elixir 75ml", Decimal("210.50"), 2),
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            return
        for pid, name, price, stock in PERFUMES:
            db.add(ProductModel(id=pid, name=name, price=price, stock=stock))

        customer = CustomerModel(id=1, name="Demo Customer", email="demo@example.com")
        customer.addresses.append(
            AddressModel(province="San Jose", canton="Escazu", district="San Rafael")
        )
        db.add(customer)
        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    seed()
