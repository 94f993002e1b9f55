import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

# Load .env before settings read the environment
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from config.logging import get_logger
from config.settings import (
    DEFAULT_AMOUNT,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
    EXAMPLE_QUERIES,
    UI_STATIC_DIR,
)
from services.exchange.converter import (
    ConversionError,
    RateUnavailableError,
    convert_fields,
    convert_query,
)
from services.exchange.currencies import CURRENCY_LIST

logger = get_logger("UI")
app = FastAPI(title="Currency Whisper")

app.mount("/static", StaticFiles(directory=UI_STATIC_DIR), name="static")


@app.get("/")
async def index():
    return FileResponse(UI_STATIC_DIR / "index.html")


@app.get("/config")
async def get_config():
    return {
        "defaults": {
            "amount": DEFAULT_AMOUNT,
            "from_currency": DEFAULT_FROM_CURRENCY,
            "to_currency": DEFAULT_TO_CURRENCY,
        },
        "currencies": [currency._asdict() for currency in CURRENCY_LIST],
        "examples": EXAMPLE_QUERIES,
    }


def _raise_http(exc: ConversionError):
    status_code = 502 if isinstance(exc, RateUnavailableError) else 400
    logger.warning("Conversion rejected (%s): %s", status_code, exc)
    raise HTTPException(status_code=status_code, detail=exc.to_detail()) from exc


@app.get("/api/convert")
async def convert_natural_language(query: str = Query("", description="Free-text conversion request")):
    try:
        report = await convert_query(query)
        return report.to_dict()
    except ConversionError as exc:
        _raise_http(exc)


@app.get("/api/convert/structured")
async def convert_structured(
    amount: str = Query(DEFAULT_AMOUNT, description="Amount, commas allowed"),
    from_currency: str = Query(DEFAULT_FROM_CURRENCY, description="Source currency code"),
    to_currency: str = Query(DEFAULT_TO_CURRENCY, description="Target currency code"),
):
    try:
        report = await convert_fields(amount, from_currency, to_currency)
        return report.to_dict()
    except ConversionError as exc:
        _raise_http(exc)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    uvicorn.run("ui.app:app", host="0.0.0.0", port=port, reload=False)
