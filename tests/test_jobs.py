from __future__ import annotations

import pytest

from jobly.errors import BadRequestError
from jobly.models.job import Job
from jobly.schemas.job import JobCreate
from jobly.services import job_service


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def test_list_jobs(client, seeded) -> None:
    r = client.get("/jobs")
    assert r.status_code == 200
    jobs = r.json()["jobs"]
    assert len(jobs) == 1
    assert jobs[0]["title"] == "testJob"
    assert jobs[0]["company_handle"] == "testHandle2"


def test_list_jobs_filters(client, seeded, db_session) -> None:
    db_session.add_all(
        [
            Job(title="Senior Engineer", salary=150000, equity=0.01, company_handle="testHandle2"),
            Job(title="Intern", salary=20000, equity=None, company_handle="testHandle2"),
        ]
    )
    db_session.commit()

    r = client.get("/jobs", params={"search": "engineer"})
    assert [j["title"] for j in r.json()["jobs"]] == ["Senior Engineer"]

    r = client.get("/jobs", params={"min_salary": 1000})
    assert {j["title"] for j in r.json()["jobs"]} == {"Senior Engineer", "Intern"}

    r = client.get("/jobs", params={"min_equity": 0.1})
    assert [j["title"] for j in r.json()["jobs"]] == ["testJob"]


def test_list_jobs_invalid_query_is_400(client) -> None:
    assert client.get("/jobs", params={"min_equity": 2}).status_code == 400


def test_get_job(client, seeded) -> None:
    r = client.get(f"/jobs/{seeded['job_id']}")
    assert r.status_code == 200
    job = r.json()["job"]
    assert job["salary"] == 22.22
    assert job["equity"] == 0.5
    assert client.get("/jobs/999").status_code == 404


def test_create_job(client, seeded) -> None:
    payload = {"title": "Data Analyst", "salary": 90000, "equity": 0.05, "company_handle": "testHandle2"}
    r = client.post("/jobs", json=payload, headers=_bearer(seeded["token"]))
    assert r.status_code == 201
    job = r.json()["job"]
    assert job["title"] == "Data Analyst"
    assert isinstance(job["id"], int)

    detail = client.get("/companies/testHandle2").json()["company"]
    assert {j["title"] for j in detail["jobs"]} == {"testJob", "Data Analyst"}


def test_create_job_unknown_company_is_400(client, seeded) -> None:
    payload = {"title": "Ghost Job", "company_handle": "nope"}
    r = client.post("/jobs", json=payload, headers=_bearer(seeded["token"]))
    assert r.status_code == 400


def test_create_job_invalid_equity_is_400(client, seeded) -> None:
    payload = {"title": "Bad", "equity": 1.5, "company_handle": "testHandle2"}
    r = client.post("/jobs", json=payload, headers=_bearer(seeded["token"]))
    assert r.status_code == 400


def test_job_mutations_require_token(client, seeded) -> None:
    assert client.post("/jobs", json={"title": "x", "company_handle": "testHandle2"}).status_code == 401
    assert client.patch(f"/jobs/{seeded['job_id']}", json={"title": "x"}).status_code == 401
    assert client.delete(f"/jobs/{seeded['job_id']}").status_code == 401


def test_update_job_ignores_company_handle(client, seeded) -> None:
    r = client.patch(
        f"/jobs/{seeded['job_id']}",
        json={"title": "Renamed", "company_handle": "elsewhere"},
        headers=_bearer(seeded["token"]),
    )
    assert r.status_code == 200
    job = r.json()["job"]
    assert job["title"] == "Renamed"
    assert job["company_handle"] == "testHandle2"
    assert job["salary"] == 22.22

    r = client.patch("/jobs/999", json={"title": "Nope"}, headers=_bearer(seeded["token"]))
    assert r.status_code == 404


def test_delete_job(client, seeded) -> None:
    r = client.delete(f"/jobs/{seeded['job_id']}", headers=_bearer(seeded["token"]))
    assert r.status_code == 200
    assert r.json() == {"message": "Job deleted"}
    assert client.get(f"/jobs/{seeded['job_id']}").status_code == 404
    assert client.delete(f"/jobs/{seeded['job_id']}", headers=_bearer(seeded["token"])).status_code == 404


def test_create_job_company_deleted_mid_request_is_bad_request(scratch_session, monkeypatch) -> None:
    # The company check passes, then the insert hits the foreign key.
    monkeypatch.setattr(job_service, "_company_exists", lambda *args, **kwargs: True)
    with pytest.raises(BadRequestError):
        job_service.create_job(scratch_session, JobCreate(title="Orphan", company_handle="gone"))

    assert job_service.find_all_jobs(scratch_session) == []
