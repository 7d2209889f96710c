"""
FastAPI routers, one module per resource.

Each module exposes an APIRouter included by the application factory.
"""
