"""
CORS headers for browser clients.

Starlette's CORSMiddleware only answers requests that carry an `Origin`
header; the public frontend and plain `curl` checks both expect the headers
on every response, so they are attached unconditionally here.
"""

from __future__ import annotations

from fastapi import FastAPI, Request


CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
}


def register_cors(app: FastAPI) -> None:
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response
