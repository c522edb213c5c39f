"""Route bundles for the API."""
from . import autorun, engine, system

ROUTERS = [
    engine.router,
    autorun.router,
    system.router,
]
