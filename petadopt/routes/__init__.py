"""HTTP routers for PetAdopt API."""

from . import adoptions, mocks, pets, sessions, users

ROUTERS = [
    users.router,
    pets.router,
    adoptions.router,
    sessions.router,
    mocks.router,
]

__all__ = ["ROUTERS"]
