"""Application use cases: creating, reading and driving a mission control."""

from __future__ import annotations

from marsrover.common import Command, UUIDGenerator
from marsrover.domain import DomainError, MissionControl, RoverControl, RoverFactory, Platform, User
from marsrover.dto import (
    CreateMissionControlRequest,
    GetMissionControlRequest,
    GetMissionControlResponse,
    MissionControlResponse,
    MoveRoversRequest,
    PlatformResponse,
    PositionResponse,
    RoverResponse,
)
from marsrover.ports import (
    CreateMissionControlPort,
    GetMissionControlPort,
    MissionControlRepository,
    MoveRoversPort,
    PlatformRepository,
    RoverRepository,
    UserRepository,
)


class UseCaseError(Exception):
    """Raised when a use case cannot complete."""


def _rover_response(rover: RoverControl) -> RoverResponse:
    return RoverResponse(
        uuid=rover.uuid,
        position=PositionResponse(x=rover.position.x, y=rover.position.y),
        direction=rover.direction.value,
    )


def _describe(message: str, mission_control: MissionControl) -> GetMissionControlResponse:
    return GetMissionControlResponse(
        message=message,
        mission_control=MissionControlResponse(uuid=mission_control.uuid),
        platform=PlatformResponse(
            width=mission_control.platform.width,
            height=mission_control.platform.height,
        ),
        rovers=[_rover_response(rover) for rover in mission_control.rovers],
    )


class CreateMissionControlUseCase(CreateMissionControlPort):
    """Creates a user, a platform, a mission control and its rovers."""

    def __init__(
        self,
        platform_repository: PlatformRepository,
        rover_repository: RoverRepository,
        mission_control_repository: MissionControlRepository,
        user_repository: UserRepository,
        rover_factory: RoverFactory,
        uuid_generator: UUIDGenerator,
    ) -> None:
        self.platform_repository = platform_repository
        self.rover_repository = rover_repository
        self.mission_control_repository = mission_control_repository
        self.user_repository = user_repository
        self.rover_factory = rover_factory
        self.uuid_generator = uuid_generator

    def execute(self, request: CreateMissionControlRequest) -> GetMissionControlResponse:
        user = User(request.username, uuid=self.uuid_generator.generate())
        self.user_repository.save(user)

        platform = Platform(
            request.platform.width,
            request.platform.height,
            [],
            uuid=self.uuid_generator.generate(),
        )
        self.platform_repository.save(platform)

        mission_control = MissionControl(platform, uuid=self.uuid_generator.generate())

        rovers: list[RoverResponse] = []
        for config in request.rovers:
            try:
                rover = self.rover_factory.new_rover_control(
                    config.initial_position.x,
                    config.initial_position.y,
                    config.direction,
                    platform,
                    mission_control.rovers,
                )
            except DomainError as err:
                raise UseCaseError(f"unable to create rovers: {err}") from err

            mission_control.add_rover(rover)
            rover.uuid = self.uuid_generator.generate()
            self.rover_repository.save(rover)
            rovers.append(_rover_response(rover))

        self.mission_control_repository.save(user, mission_control)

        return GetMissionControlResponse(
            message="Platform created successfully",
            mission_control=MissionControlResponse(uuid=mission_control.uuid),
            platform=PlatformResponse(width=platform.width, height=platform.height),
            rovers=rovers or None,
        )


class GetMissionControlByUsernameUseCase(GetMissionControlPort):
    """Looks up the mission control that belongs to a user."""

    def __init__(
        self,
        mission_control_repository: MissionControlRepository,
        user_repository: UserRepository,
    ) -> None:
        self.mission_control_repository = mission_control_repository
        self.user_repository = user_repository

    def execute(self, request: GetMissionControlRequest) -> GetMissionControlResponse:
        user = self.user_repository.get_by_username(request.username)
        mission_control = self.mission_control_repository.get_by_user(user)
        return _describe("Mission Control retrieved successfully", mission_control)


class MoveRoversUseCase(MoveRoversPort):
    """Runs command strings on a user's rovers."""

    def __init__(
        self,
        mission_control_repository: MissionControlRepository,
        user_repository: UserRepository,
        rover_repository: RoverRepository,
    ) -> None:
        self.mission_control_repository = mission_control_repository
        self.user_repository = user_repository
        self.rover_repository = rover_repository

    def execute(self, request: MoveRoversRequest) -> GetMissionControlResponse:
        try:
            user = self.user_repository.get_by_username(request.username)
            mission_control = self.mission_control_repository.get_by_user(user)
        except LookupError:
            raise UseCaseError("mission control not found") from None
        if user is None or mission_control is None:
            raise UseCaseError("mission control not found")

        for rover_command in request.rovers:
            try:
                rover = self.rover_repository.get_by_uuid(rover_command.uuid)
            except LookupError:
                raise UseCaseError("rover not found") from None
            if rover is None:
                raise UseCaseError("rover not found")

            for letter in rover_command.commands:
                try:
                    command = Command(letter)
                except ValueError:
                    raise UseCaseError("invalid command") from None
                if command is Command.LEFT:
                    rover.turn_left()
                elif command is Command.RIGHT:
                    rover.turn_right()
                else:
                    rover.move()

            self.rover_repository.save(rover)

        return _describe("Rovers moved successfully", mission_control)