"""
Serverless entry point (Netlify Functions / AWS Lambda).

Wraps the FastAPI app so each invocation is one ASGI request/response cycle.
"""

from __future__ import annotations

from mangum import Mangum

from main import app

handler = Mangum(app, lifespan="off")
