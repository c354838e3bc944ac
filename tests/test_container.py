import json
import uuid

from marsrover.container import build_container, create_router


def _create(router, username="test_user"):
    payload = {
        "username": username,
        "platform": {"width": 10, "height": 10},
        "rovers": [
            {"initial_position": {"x": 1, "y": 2}, "direction": "N"},
            {"initial_position": {"x": 3, "y": 3}, "direction": "E"},
        ],
    }
    return router.dispatch("POST", "/api/mission-control", json.dumps(payload).encode())


def test_use_cases_share_the_repositories():
    container = build_container()
    create = container.create_mission_control_use_case
    assert create.user_repository is container.user_repository
    assert create.rover_repository is container.rover_repository
    assert container.move_rovers_use_case.rover_repository is container.rover_repository
    assert (
        container.get_mission_control_by_username_use_case.mission_control_repository
        is container.mission_control_repository
    )


def test_controllers_use_the_container_use_cases():
    container = build_container()
    assert container.create_mission_control_controller.use_case is container.create_mission_control_use_case
    assert container.move_rovers_controller.use_case is container.move_rovers_use_case
    assert (
        container.get_mission_control_controller.use_case
        is container.get_mission_control_by_username_use_case
    )


def test_router_stores_into_container_repositories():
    container = build_container()
    router = create_router(container)
    response = _create(router)
    assert response.status == 200

    user = container.user_repository.get_by_username("test_user")
    assert uuid.UUID(user.uuid).version == 4
    assert len(container.rover_repository.list()) == 2
    mission = container.mission_control_repository.get_by_user(user)
    assert mission.uuid == response.json()["mission_control"]["uuid"]


def test_router_moves_stored_rovers():
    container = build_container()
    router = create_router(container)
    rover_uuid = _create(router).json()["rovers"][0]["uuid"]
    body = json.dumps({"rovers": [{"uuid": rover_uuid, "commands": "LMLMLMLMM"}]}).encode()
    response = router.dispatch("POST", "/api/mission-control/test_user/move-rovers", body)
    assert response.status == 200
    rover = container.rover_repository.get_by_uuid(rover_uuid)
    assert (rover.position.x, rover.position.y) == (1, 3)
    assert rover.direction.value == "N"


def test_containers_are_independent():
    first = create_router(build_container())
    second = create_router(build_container())
    assert _create(first).status == 200
    assert second.dispatch("GET", "/api/mission-control/test_user").status == 500


def test_create_router_without_container():
    router = create_router()
    response = router.dispatch("GET", "/api/health")
    assert response.json() == {"status": "OK"}


def test_uuid_generator_gives_distinct_ids():
    generator = build_container().uuid_generator
    ids = {generator.generate() for _ in range(20)}
    assert len(ids) == 20