# product_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Product Catalog (dev mock)")


PRODUCTS = {
    "P1": {"id": "P1", "name": "Noir Absolu Extrait 50ml", "price": 120.00, "stock": 8},
    "P2": {"id": "P2", "name": "Fleur de Sel Eau de Toilette 100ml", "price": 15.00, "stock": 25},
    "P3": {"id": "P3", "name": "Ambre Royal Elixir 75ml", "price": 210.50, "stock": 2},
}

@app.get("/products/{product_id}")
def get_product(product_id: str):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
