import pytest
from sqlalchemy.orm import Session

import taskflow.models as models
from taskflow.services import boards, tasks


@pytest.fixture
def board(db_session: Session, alice) -> models.Board:
    return boards.create_board(db_session, "Sprint 1", alice.id)


@pytest.fixture
def todo_id(board) -> int:
    return board.columns[0].id


@pytest.fixture
def doing_id(board) -> int:
    return board.columns[1].id


def _positions(session: Session, column_id: int):
    rows = (
        session.query(models.Task.title, models.Task.position)
        .filter(models.Task.column_id == column_id)
        .order_by(models.Task.position)
        .all()
    )
    return [(title, position) for title, position in rows]


def _seed(session: Session, column_id: int, user_id: int, *titles: str):
    return [tasks.create_task(session, title, None, column_id, user_id) for title in titles]


def test_create_task_appends_at_end(db_session: Session, alice, todo_id):
    first = tasks.create_task(db_session, "Fix bug", "stack trace attached", todo_id, alice.id)
    second = tasks.create_task(db_session, "Write tests", None, todo_id, alice.id)

    assert first.position == 0
    assert first.description == "stack trace attached"
    assert second.position == 1
    assert second.description is None


def test_create_task_uses_max_position_plus_one(db_session: Session, alice, todo_id):
    db_session.add(models.Task(title="Legacy", column_id=todo_id, position=7))
    db_session.commit()

    task = tasks.create_task(db_session, "New", None, todo_id, alice.id)

    assert task.position == 8


def test_create_task_in_foreign_column_is_denied(db_session: Session, bob, todo_id):
    assert tasks.create_task(db_session, "Sneaky", None, todo_id, bob.id) is None
    assert tasks.create_task(db_session, "Nowhere", None, 999, bob.id) is None
    assert db_session.query(models.Task).count() == 0


def test_update_task_changes_text_only(db_session: Session, alice, bob, todo_id):
    _seed(db_session, todo_id, alice.id, "Other")
    task = tasks.create_task(db_session, "Draft", "old", todo_id, alice.id)

    assert tasks.update_task(db_session, task.id, "Stolen", None, bob.id) is None
    updated = tasks.update_task(db_session, task.id, "Final", None, alice.id)

    assert updated.title == "Final"
    assert updated.description is None
    assert updated.position == 1
    assert updated.column_id == todo_id


def test_scenario_create_then_reorder(db_session: Session, alice, board, todo_id):
    fix_bug = tasks.create_task(db_session, "Fix bug", None, todo_id, alice.id)
    write_tests = tasks.create_task(db_session, "Write tests", None, todo_id, alice.id)
    assert (fix_bug.position, write_tests.position) == (0, 1)

    assert tasks.reorder_tasks(db_session, todo_id, [(write_tests.id, 0), (fix_bug.id, 1)], alice.id)

    loaded = boards.get_board(db_session, board.id, alice.id)
    todo = next(column for column in loaded.columns if column.name == "To Do")
    assert [task.title for task in todo.tasks] == ["Write tests", "Fix bug"]


def test_reorder_applies_full_permutation_exactly(db_session: Session, alice, todo_id):
    a, b, c, d = _seed(db_session, todo_id, alice.id, "a", "b", "c", "d")
    ids = {"a": a.id, "b": b.id, "c": c.id, "d": d.id}

    perm = [(ids["a"], 2), (ids["b"], 0), (ids["c"], 3), (ids["d"], 1)]
    assert tasks.reorder_tasks(db_session, todo_id, perm, alice.id)
    assert _positions(db_session, todo_id) == [("b", 0), ("d", 1), ("a", 2), ("c", 3)]

    # Identity permutation of the current order changes nothing.
    identity = [(ids["b"], 0), (ids["d"], 1), (ids["a"], 2), (ids["c"], 3)]
    assert tasks.reorder_tasks(db_session, todo_id, identity, alice.id)
    assert _positions(db_session, todo_id) == [("b", 0), ("d", 1), ("a", 2), ("c", 3)]


def test_reorder_with_task_from_other_column_changes_nothing(
    db_session: Session, alice, todo_id, doing_id,
):
    a, b = _seed(db_session, todo_id, alice.id, "a", "b")
    (elsewhere,) = _seed(db_session, doing_id, alice.id, "elsewhere")

    ok = tasks.reorder_tasks(db_session, todo_id, [(b.id, 0), (a.id, 1), (elsewhere.id, 2)], alice.id)

    assert ok is False
    assert _positions(db_session, todo_id) == [("a", 0), ("b", 1)]
    assert _positions(db_session, doing_id) == [("elsewhere", 0)]


def test_reorder_with_unknown_task_id_changes_nothing(db_session: Session, alice, todo_id):
    a, b = _seed(db_session, todo_id, alice.id, "a", "b")

    assert tasks.reorder_tasks(db_session, todo_id, [(b.id, 0), (9999, 1)], alice.id) is False
    assert _positions(db_session, todo_id) == [("a", 0), ("b", 1)]


def test_reorder_rejects_duplicates_and_collisions(db_session: Session, alice, todo_id):
    a, b, c = _seed(db_session, todo_id, alice.id, "a", "b", "c")

    assert tasks.reorder_tasks(db_session, todo_id, [(a.id, 1), (a.id, 2)], alice.id) is False
    assert tasks.reorder_tasks(db_session, todo_id, [(a.id, 1), (b.id, 1), (c.id, 0)], alice.id) is False
    # Moving "c" to 0 alone collides with "a", which keeps position 0.
    assert tasks.reorder_tasks(db_session, todo_id, [(c.id, 0)], alice.id) is False
    assert _positions(db_session, todo_id) == [("a", 0), ("b", 1), ("c", 2)]


def test_reorder_rejects_negative_position(db_session: Session, alice, todo_id):
    a, b = _seed(db_session, todo_id, alice.id, "a", "b")

    assert tasks.reorder_tasks(db_session, todo_id, [(a.id, -1), (b.id, 0)], alice.id) is False
    assert _positions(db_session, todo_id) == [("a", 0), ("b", 1)]


def test_partial_reorder_without_collision_is_compacted(db_session: Session, alice, todo_id):
    a, b, c = _seed(db_session, todo_id, alice.id, "a", "b", "c")

    assert tasks.reorder_tasks(db_session, todo_id, [(a.id, 5)], alice.id)

    assert _positions(db_session, todo_id) == [("b", 0), ("c", 1), ("a", 2)]


def test_reorder_by_non_owner_fails(db_session: Session, alice, bob, todo_id):
    a, b = _seed(db_session, todo_id, alice.id, "a", "b")

    assert tasks.reorder_tasks(db_session, todo_id, [(a.id, 1), (b.id, 0)], bob.id) is False
    assert tasks.reorder_tasks(db_session, todo_id, [], bob.id) is False
    assert _positions(db_session, todo_id) == [("a", 0), ("b", 1)]


def test_delete_task_restores_contiguity(db_session: Session, alice, bob, todo_id):
    a, b, c = _seed(db_session, todo_id, alice.id, "a", "b", "c")

    assert tasks.delete_task(db_session, b.id, bob.id) is False
    assert tasks.delete_task(db_session, b.id, alice.id) is True

    assert _positions(db_session, todo_id) == [("a", 0), ("c", 1)]
    assert tasks.delete_task(db_session, 9999, alice.id) is False


def test_move_task_appends_in_destination_and_compacts_source(
    db_session: Session, alice, todo_id, doing_id,
):
    a, b, c = _seed(db_session, todo_id, alice.id, "a", "b", "c")
    _seed(db_session, doing_id, alice.id, "x", "y")

    assert tasks.move_task_to_column(db_session, a.id, doing_id, alice.id) is True

    assert _positions(db_session, todo_id) == [("b", 0), ("c", 1)]
    assert _positions(db_session, doing_id) == [("x", 0), ("y", 1), ("a", 2)]


def test_move_task_into_empty_column(db_session: Session, alice, board, todo_id):
    (a,) = _seed(db_session, todo_id, alice.id, "a")
    done_id = board.columns[2].id

    assert tasks.move_task_to_column(db_session, a.id, done_id, alice.id)

    assert _positions(db_session, done_id) == [("a", 0)]
    assert _positions(db_session, todo_id) == []


def test_move_task_within_same_column_is_noop(db_session: Session, alice, todo_id):
    a, b = _seed(db_session, todo_id, alice.id, "a", "b")

    assert tasks.move_task_to_column(db_session, a.id, todo_id, alice.id) is True
    assert _positions(db_session, todo_id) == [("a", 0), ("b", 1)]


def test_move_task_requires_ownership_of_both_columns(
    db_session: Session, alice, bob, todo_id,
):
    (a,) = _seed(db_session, todo_id, alice.id, "a")
    bobs_board = boards.create_board(db_session, "Bob's", bob.id)
    bobs_column = bobs_board.columns[0].id

    # Source owned, destination not.
    assert tasks.move_task_to_column(db_session, a.id, bobs_column, alice.id) is False
    # Destination owned, task not.
    assert tasks.move_task_to_column(db_session, a.id, bobs_column, bob.id) is False
    assert tasks.move_task_to_column(db_session, a.id, 9999, alice.id) is False

    assert _positions(db_session, todo_id) == [("a", 0)]
    assert _positions(db_session, bobs_column) == []
