# essence_orders/api/__init__.py
from fastapi import FastAPI
from essence_orders.api.routers import carts, catalog, customers, health, orders


def create_app() -> FastAPI:
    app = FastAPI(
        title="Essence Order Service",
        version="1.0.0",
    )

    app.include_router(health.router)
    app.include_router(customers.router)
    app.include_router(catalog.router)
    app.include_router(carts.router)
    app.include_router(orders.router)

    return app
