"""
FastAPI routers grouped by concern (info page, signatures).

Each module exposes an APIRouter that the application factory includes.
"""
