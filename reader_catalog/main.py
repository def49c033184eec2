# reader_catalog/main.py
import logging

from fastapi import FastAPI

from .catalog import catalog_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


app = FastAPI(
    title="Reader Catalog",
    description=(
        "Browse a library catalog by free-text search and by tags "
        "across time period, region, discipline and genre."
    ),
    version="1.0.0",
)

app.include_router(catalog_router)


# Health check
@app.get("/")
def health_check():
    return {"status": "ok", "message": "Reader catalog live"}
