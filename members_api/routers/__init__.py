"""
routers/ — FastAPI route modules.

Each file builds a thin APIRouter around a service instance.
Routers decode input, call the service, and return responses.
"""
