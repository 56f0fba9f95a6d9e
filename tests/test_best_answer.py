from conftest import sample_program, user_headers


def _propose(client, consultation_id: str, trainer_headers: dict[str, str]) -> str:
    resp = client.post(
        "/proposals",
        json={
            "consultation_id": consultation_id,
            "title": "Plan",
            "content": "Details",
            "program": sample_program(),
        },
        headers=trainer_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def test_customer_selects_best_answer(client, make_consultation, make_trainer):
    customer = user_headers("customer-u")
    consultation_id = make_consultation("customer-u", title="Lose 5kg")
    consultation = client.get(f"/consultations/{consultation_id}").json()
    assert consultation["status"] == "open"
    assert consultation["best_answer_id"] is None

    p1 = _propose(client, consultation_id, make_trainer("trainer-t"))

    resp = client.post(f"/consultations/{consultation_id}/best-answer", json={"proposal_id": p1}, headers=customer)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    consultation = client.get(f"/consultations/{consultation_id}").json()
    assert consultation["status"] == "answered"
    assert consultation["best_answer_id"] == p1
    assert client.get(f"/proposals/{p1}").json()["is_best_answer"] is True


def test_reselecting_moves_the_flag(client, make_consultation, make_trainer):
    customer = user_headers("customer-u")
    consultation_id = make_consultation("customer-u")
    p1 = _propose(client, consultation_id, make_trainer("trainer-1"))
    p2 = _propose(client, consultation_id, make_trainer("trainer-2"))

    client.post(f"/consultations/{consultation_id}/best-answer", json={"proposal_id": p1}, headers=customer)
    resp = client.post(f"/consultations/{consultation_id}/best-answer", json={"proposal_id": p2}, headers=customer)
    assert resp.status_code == 200

    consultation = client.get(f"/consultations/{consultation_id}").json()
    assert consultation["status"] == "answered"
    assert consultation["best_answer_id"] == p2
    flags = {p["id"]: p["is_best_answer"] for p in client.get(f"/proposals/by-consultation/{consultation_id}").json()}
    assert flags == {p1: False, p2: True}


def test_only_owner_can_select(client, make_consultation, make_trainer):
    consultation_id = make_consultation("customer-u")
    p1 = _propose(client, consultation_id, make_trainer("trainer-1"))

    resp = client.post(
        f"/consultations/{consultation_id}/best-answer",
        json={"proposal_id": p1},
        headers=user_headers("someone-else"),
    )
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Unauthorized"

    consultation = client.get(f"/consultations/{consultation_id}").json()
    assert consultation["status"] == "open"
    assert consultation["best_answer_id"] is None


def test_unknown_consultation_looks_like_someone_elses(client):
    resp = client.post(
        "/consultations/missing/best-answer",
        json={"proposal_id": "p"},
        headers=user_headers("customer-u"),
    )
    assert resp.status_code == 403


def test_proposal_must_belong_to_consultation(client, make_consultation, make_trainer):
    trainer = make_trainer("trainer-1")
    mine = make_consultation("customer-u")
    other = make_consultation("customer-v")
    foreign_proposal = _propose(client, other, trainer)

    resp = client.post(
        f"/consultations/{mine}/best-answer",
        json={"proposal_id": foreign_proposal},
        headers=user_headers("customer-u"),
    )
    assert resp.status_code == 422

    resp = client.post(
        f"/consultations/{mine}/best-answer",
        json={"proposal_id": "missing"},
        headers=user_headers("customer-u"),
    )
    assert resp.status_code == 422
    assert client.get(f"/consultations/{mine}").json()["best_answer_id"] is None


def test_closed_consultation_cannot_be_answered(client, db_session, make_consultation, make_trainer):
    from consultations_service.models import Consultation

    consultation_id = make_consultation("customer-u")
    p1 = _propose(client, consultation_id, make_trainer("trainer-1"))

    consultation = db_session.get(Consultation, consultation_id)
    consultation.status = "closed"
    db_session.commit()

    resp = client.post(
        f"/consultations/{consultation_id}/best-answer",
        json={"proposal_id": p1},
        headers=user_headers("customer-u"),
    )
    assert resp.status_code == 409
    assert client.get(f"/proposals/{p1}").json()["is_best_answer"] is False


def test_selecting_same_proposal_twice_is_idempotent(client, make_consultation, make_trainer):
    customer = user_headers("customer-u")
    consultation_id = make_consultation("customer-u")
    p1 = _propose(client, consultation_id, make_trainer("trainer-1"))

    for _ in range(2):
        resp = client.post(f"/consultations/{consultation_id}/best-answer", json={"proposal_id": p1}, headers=customer)
        assert resp.status_code == 200

    assert client.get(f"/consultations/{consultation_id}").json()["best_answer_id"] == p1
    assert client.get(f"/proposals/{p1}").json()["is_best_answer"] is True
