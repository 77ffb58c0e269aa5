import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from app.core.exceptions import MatchLookupFailed, InvalidVoteTarget, VoteSubmissionFailed
from app.models.vote_db import vote_crud
from app.models.vote_db.vote_crud import get_voted_target_ids, resolve_matches, submit_votes


def test_mutual_votes_match_both_ways(db, make_profile):
    a = make_profile("a", "male", 1, phone="010-1111-1111")
    b = make_profile("b", "female", 1, phone="010-2222-2222")

    submit_votes(db, a, [b.id])
    submit_votes(db, b, [a.id])

    assert [p.id for p in resolve_matches(db, a)] == [b.id]
    assert [p.id for p in resolve_matches(db, b)] == [a.id]


def test_one_sided_vote_is_not_a_match(db, make_profile):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)

    submit_votes(db, a, [b.id])

    assert resolve_matches(db, a) == []
    assert resolve_matches(db, b) == []


def test_vote_from_outside_target_set_is_ignored(db, make_profile):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)
    c = make_profile("c", "female", 2)

    submit_votes(db, a, [b.id])
    submit_votes(db, c, [a.id])

    assert resolve_matches(db, a) == []


def test_matches_are_ordered_by_seat_number(db, make_profile):
    a = make_profile("a", "male", 1)
    others = [make_profile(f"f{seat}", "female", seat) for seat in (3, 1, 2)]

    submit_votes(db, a, [p.id for p in others])
    for p in others:
        submit_votes(db, p, [a.id])

    assert [p.participant_number for p in resolve_matches(db, a)] == [1, 2, 3]


def test_no_votes_stops_after_first_query(db, engine, make_profile):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)
    submit_votes(db, b, [a.id])
    db.refresh(a)

    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    try:
        assert resolve_matches(db, a) == []
    finally:
        event.remove(engine, "before_cursor_execute", record)

    assert len(statements) == 1
    assert "voter_profile_id = " in statements[0]


def test_resubmission_replaces_previous_votes(db, make_profile):
    a = make_profile("a", "male", 1)
    x = make_profile("x", "female", 1)
    y = make_profile("y", "female", 2)
    z = make_profile("z", "female", 3)

    submit_votes(db, a, [x.id, y.id])
    submit_votes(db, a, [z.id])

    assert get_voted_target_ids(db, a) == [z.id]


def test_empty_submission_clears_votes(db, make_profile):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)

    submit_votes(db, a, [b.id])
    submit_votes(db, a, [])

    assert get_voted_target_ids(db, a) == []


def test_duplicate_targets_collapse(db, make_profile):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)

    assert submit_votes(db, a, [b.id, b.id]) == [b.id]
    assert get_voted_target_ids(db, a) == [b.id]


@pytest.mark.parametrize("gender, day, time", [
    ("male", "mon", "18:00"),
    ("female", "tue", "18:00"),
    ("female", "mon", "18:30"),
])
def test_targets_outside_slot_or_same_gender_are_rejected(db, make_profile, gender, day, time):
    a = make_profile("a", "male", 1)
    other = make_profile("o", gender, 2, day=day, time=time)

    with pytest.raises(InvalidVoteTarget):
        submit_votes(db, a, [other.id])
    assert get_voted_target_ids(db, a) == []


def test_self_vote_is_rejected(db, make_profile):
    a = make_profile("a", "male", 1)

    with pytest.raises(InvalidVoteTarget):
        submit_votes(db, a, [a.id])


def test_rejected_submission_keeps_old_votes(db, make_profile):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)
    c = make_profile("c", "male", 2)

    submit_votes(db, a, [b.id])
    with pytest.raises(InvalidVoteTarget):
        submit_votes(db, a, [b.id, c.id])

    assert get_voted_target_ids(db, a) == [b.id]


def test_database_error_surfaces_as_match_lookup_failed(db, make_profile, monkeypatch):
    a = make_profile("a", "male", 1)

    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(vote_crud, "get_voted_target_ids", broken)

    with pytest.raises(MatchLookupFailed):
        resolve_matches(db, a)


def test_database_error_on_submit_rolls_back(db, make_profile, monkeypatch):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)
    submit_votes(db, a, [b.id])

    def broken_commit():
        raise OperationalError("COMMIT", {}, Exception("disk full"))

    monkeypatch.setattr(db, "commit", broken_commit)

    with pytest.raises(VoteSubmissionFailed):
        submit_votes(db, a, [])

    monkeypatch.undo()
    assert get_voted_target_ids(db, a) == [b.id]


def test_database_error_while_checking_targets_surfaces_as_submission_failure(db, engine, make_profile):
    a = make_profile("a", "male", 1)
    b = make_profile("b", "female", 1)
    db.refresh(a)

    def fail_target_lookup(conn, cursor, statement, parameters, context, executemany):
        if "FROM profiles" in statement and " IN (" in statement:
            raise OperationalError(statement, parameters, Exception("connection lost"))

    event.listen(engine, "before_cursor_execute", fail_target_lookup)
    try:
        with pytest.raises(VoteSubmissionFailed):
            submit_votes(db, a, [b.id])
    finally:
        event.remove(engine, "before_cursor_execute", fail_target_lookup)

    assert get_voted_target_ids(db, a) == []
