from unittest.mock import patch

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from person_registry.main import main, parse_args, prepare, startup_person
from person_registry.models import Person


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--id", "a1", "--name", "Ayu"],
        ["--id", "a1", "--age", "30"],
        ["--name", "Ayu", "--age", "30"],
        ["--id", "a1", "--name", "Ayu", "--age", "0"],
        ["--id", "a1", "--name", "Ayu", "--age", "-4"],
    ],
)
def test_no_startup_person_without_all_parameters(argv):
    assert startup_person(parse_args(argv)) is None


def test_startup_person_from_parameters():
    person = startup_person(parse_args(["--id", "a1", "--name", "Ayu Lestari", "--age", "30"]))
    assert person.model_dump() == {"id": "a1", "full_name": "Ayu Lestari", "age": 30}


def test_prepare_inserts_one_row(person_engine):
    prepare(parse_args(["--id", "a1", "--name", "Ayu", "--age", "30"]), bind=person_engine)

    with Session(person_engine) as db:
        rows = db.execute(select(Person)).scalars().all()
    assert [(p.id, p.full_name, p.age) for p in rows] == [("a1", "Ayu", 30)]


def test_prepare_without_parameters_inserts_nothing(person_engine):
    prepare(parse_args([]), bind=person_engine)

    with Session(person_engine) as db:
        assert db.execute(select(Person)).scalars().all() == []


def test_prepare_raises_on_insert_error(person_engine):
    args = parse_args(["--id", "a1", "--name", "Ayu", "--age", "30"])
    prepare(args, bind=person_engine)

    with pytest.raises(IntegrityError):
        prepare(args, bind=person_engine)


def test_inserted_person_is_served(person_engine, person_client):
    prepare(parse_args(["--id", "a1", "--name", "Ayu", "--age", "30"]), bind=person_engine)

    response = person_client.get("/persons/a1")
    assert response.status_code == 200
    assert response.json() == {"id": "a1", "full_name": "Ayu", "age": 30}


def test_main_aborts_before_serving_on_insert_error():
    with patch("person_registry.main.prepare", side_effect=SQLAlchemyError("duplicate")), \
         patch("person_registry.main.uvicorn.run") as mock_run:
        assert main(["--id", "a1", "--name", "Ayu", "--age", "30"]) == 1
    mock_run.assert_not_called()


def test_main_serves_after_preflight():
    with patch("person_registry.main.prepare") as mock_prepare, \
         patch("person_registry.main.uvicorn.run") as mock_run:
        assert main(["--host", "127.0.0.1", "--port", "9090"]) == 0
    mock_prepare.assert_called_once()
    mock_run.assert_called_once()
    assert mock_run.call_args.kwargs == {"host": "127.0.0.1", "port": 9090}
