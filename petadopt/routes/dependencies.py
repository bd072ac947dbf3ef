"""
Request-scoped access to the services built by the application factory.
"""

from fastapi import Request

from ..services import AdoptionWorkflow, MockDataGenerator, PetsService, UsersService


def get_users_service(request: Request) -> UsersService:
    return request.app.state.users_service


def get_pets_service(request: Request) -> PetsService:
    return request.app.state.pets_service


def get_adoption_workflow(request: Request) -> AdoptionWorkflow:
    return request.app.state.adoption_workflow


def get_mock_generator(request: Request) -> MockDataGenerator:
    return request.app.state.mock_generator
