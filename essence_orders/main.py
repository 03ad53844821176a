# essence_orders/main.py
from essence_orders.api import create_app
from essence_orders.data.database import Base, engine
from essence_orders.utils.logging import get_logger
import uvicorn

logger = get_logger(__name__)

# import wszystkich modeli przed create_all
import essence_orders.data.models  # noqa: F401,E402

logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")

try:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")
except Exception as e:
    logger.error(f"Failed to create tables: {e}")
    raise


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
