from fastapi import FastAPI

from citizens import router as citizens_router
from core import cors, errors, log

log.configure_logging()

app = FastAPI(title="citizens-api")

# Public read-only data: any origin may call this API from the browser.
cors.register_cors(app)
errors.register_error_handlers(app)

app.include_router(citizens_router.router, tags=["citizens"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
