"""
FastAPI routers grouped by domain (auth, invoices).

Each module exposes an APIRouter included by the application factory. The
routers translate ActionSuccess/ActionError into redirects or JSON form state.
"""
