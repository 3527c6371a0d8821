"""
Response classes shared by every route.
"""
from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSON response that declares its charset explicitly."""
    media_type = "application/json; charset=utf-8"
