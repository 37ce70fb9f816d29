from siteops.models.meeting import Meeting, MeetingAttendee
from tests.conftest import auth_headers


def _payload(project_id, attendee_ids, **overrides):
    payload = {
        "project_id": project_id,
        "title": "Rapat koordinasi",
        "description": None,
        "scheduled_at": "2026-03-10T09:00:00",
        "location": "Zoom",
        "attendee_ids": attendee_ids,
    }
    payload.update(overrides)
    return payload


def test_create_meeting_with_attendees(client, db, seed_project, seed_users):
    attendees = [seed_users["owner"].id, seed_users["contractor"].id]
    resp = client.post(
        "/rpc/createMeeting",
        json=_payload(seed_project.id, attendees),
        headers=auth_headers(seed_users["mk"].id),
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["status"] == "scheduled"
    assert data["meeting_notes"] is None
    assert data["created_by"] == seed_users["mk"].id

    rows = db.query(MeetingAttendee).filter(MeetingAttendee.meeting_id == data["id"]).all()
    assert len(rows) == 2
    assert sorted(r.user_id for r in rows) == sorted(attendees)
    assert all(r.attended is False for r in rows)


def test_create_meeting_without_attendees(client, db, seed_project, seed_users):
    resp = client.post(
        "/rpc/createMeeting",
        json=_payload(seed_project.id, []),
        headers=auth_headers(seed_users["mk"].id),
    )
    assert resp.status_code == 200
    assert resp.json()["attendees"] == []
    assert db.query(MeetingAttendee).count() == 0


def test_get_meetings_includes_attendees(client, seed_project, seed_users):
    headers = auth_headers(seed_users["mk"].id)
    client.post("/rpc/createMeeting", json=_payload(seed_project.id, [seed_users["owner"].id]), headers=headers)
    resp = client.get("/rpc/getMeetings", params={"projectId": seed_project.id})
    assert resp.status_code == 200
    meetings = resp.json()
    assert len(meetings) == 1
    assert meetings[0]["attendees"][0]["user_id"] == seed_users["owner"].id
    assert meetings[0]["attendees"][0]["attended"] is False


def test_offset_schedule_is_returned_as_utc(client, seed_project, seed_users):
    resp = client.post(
        "/rpc/createMeeting",
        json=_payload(seed_project.id, [], scheduled_at="2026-03-10T16:00:00+07:00"),
        headers=auth_headers(seed_users["mk"].id),
    )
    assert resp.status_code == 200
    assert resp.json()["scheduled_at"] == "2026-03-10T09:00:00Z"


def test_unknown_attendee_rolls_back_meeting(client, db, seed_project, seed_users):
    resp = client.post(
        "/rpc/createMeeting",
        json=_payload(seed_project.id, [seed_users["owner"].id, 9999]),
        headers=auth_headers(seed_users["mk"].id),
    )
    assert resp.status_code == 409
    assert db.query(Meeting).count() == 0
    assert db.query(MeetingAttendee).count() == 0


def test_create_meeting_for_missing_project_is_constraint_violation(client, db, seed_users):
    resp = client.post(
        "/rpc/createMeeting",
        json=_payload(999, [seed_users["owner"].id]),
        headers=auth_headers(seed_users["mk"].id),
    )
    assert resp.status_code == 409
    assert db.query(Meeting).count() == 0
