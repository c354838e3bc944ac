"""Wiring of repositories, use cases and controllers."""

from __future__ import annotations

from dataclasses import dataclass

from marsrover.common import RandomUUIDGenerator, UUIDGenerator
from marsrover.domain import RoverFactory
from marsrover.ports import (
    MissionControlRepository,
    PlatformRepository,
    RoverRepository,
    UserRepository,
)
from marsrover.repositories import (
    InMemoryMissionControlRepository,
    InMemoryPlatformRepository,
    InMemoryRoverRepository,
    InMemoryUserRepository,
)
from marsrover.usecases import (
    CreateMissionControlUseCase,
    GetMissionControlByUsernameUseCase,
    MoveRoversUseCase,
)
from marsrover.web import (
    CreateMissionControlController,
    GetMissionControlController,
    HealthCheckController,
    MoveRoversController,
    Router,
)


@dataclass
class Container:
    """Every service the application needs, already connected."""

    uuid_generator: UUIDGenerator
    platform_repository: PlatformRepository
    rover_repository: RoverRepository
    mission_control_repository: MissionControlRepository
    user_repository: UserRepository
    rover_factory: RoverFactory
    create_mission_control_use_case: CreateMissionControlUseCase
    get_mission_control_by_username_use_case: GetMissionControlByUsernameUseCase
    move_rovers_use_case: MoveRoversUseCase
    health_check_controller: HealthCheckController
    create_mission_control_controller: CreateMissionControlController
    get_mission_control_controller: GetMissionControlController
    move_rovers_controller: MoveRoversController


def build_container() -> Container:
    """Build a fresh container backed by in-memory storage."""
    uuid_generator = RandomUUIDGenerator()
    platform_repository = InMemoryPlatformRepository()
    rover_repository = InMemoryRoverRepository()
    mission_control_repository = InMemoryMissionControlRepository()
    user_repository = InMemoryUserRepository()
    rover_factory = RoverFactory()

    create_use_case = CreateMissionControlUseCase(
        platform_repository,
        rover_repository,
        mission_control_repository,
        user_repository,
        rover_factory,
        uuid_generator,
    )
    get_use_case = GetMissionControlByUsernameUseCase(mission_control_repository, user_repository)
    move_use_case = MoveRoversUseCase(mission_control_repository, user_repository, rover_repository)

    return Container(
        uuid_generator=uuid_generator,
        platform_repository=platform_repository,
        rover_repository=rover_repository,
        mission_control_repository=mission_control_repository,
        user_repository=user_repository,
        rover_factory=rover_factory,
        create_mission_control_use_case=create_use_case,
        get_mission_control_by_username_use_case=get_use_case,
        move_rovers_use_case=move_use_case,
        health_check_controller=HealthCheckController(),
        create_mission_control_controller=CreateMissionControlController(create_use_case),
        get_mission_control_controller=GetMissionControlController(get_use_case),
        move_rovers_controller=MoveRoversController(move_use_case),
    )


def create_router(container: Container | None = None) -> Router:
    """Build the API router from a container, making one if none is given."""
    if container is None:
        container = build_container()
    return Router(
        container.health_check_controller,
        container.create_mission_control_controller,
        container.get_mission_control_controller,
        container.move_rovers_controller,
    )