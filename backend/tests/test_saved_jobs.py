"""Tests for the /user/saved endpoints."""

from datetime import datetime, timedelta

import pytest

from jobboard.models import Job, SavedJob


@pytest.fixture
def multiple_jobs(db, recruiter):
    """Create multiple test jobs."""
    jobs = []
    for i in range(3):
        job = Job(recruiter_id=recruiter.id, title=f"Job {i}", location=f"City {i}")
        db.add(job)
        jobs.append(job)
    db.commit()
    for job in jobs:
        db.refresh(job)
    return jobs


@pytest.fixture
def saved_job(db, candidate, job):
    """Create a saved job for the candidate."""
    saved = SavedJob(user_id=candidate.id, job_id=job.id)
    db.add(saved)
    db.commit()
    db.refresh(saved)
    return saved


class TestListSavedJobs:
    """Tests for GET /user/saved endpoint."""

    def test_list_saved_jobs_unauthenticated(self, client):
        """Should return 403 when not authenticated."""
        response = client.get("/user/saved")
        assert response.status_code == 403

    def test_list_saved_jobs_empty(self, client, candidate_headers):
        response = client.get("/user/saved", headers=candidate_headers)
        assert response.status_code == 200
        assert response.json()["saved_jobs"] == []

    def test_list_saved_jobs_with_jobs(self, client, candidate_headers, saved_job, job):
        """Should return list of saved jobs with job details."""
        response = client.get("/user/saved", headers=candidate_headers)
        assert response.status_code == 200
        data = response.json()
        assert len(data["saved_jobs"]) == 1
        assert data["saved_jobs"][0]["job_id"] == job.id
        assert data["saved_jobs"][0]["job"]["title"] == "Backend Engineer"

    def test_list_saved_jobs_user_isolation(
        self, client, db, candidate_headers, second_candidate_headers, saved_job, second_candidate, multiple_jobs
    ):
        """Users should only see their own saved jobs."""
        db.add(SavedJob(user_id=second_candidate.id, job_id=multiple_jobs[0].id))
        db.commit()

        response = client.get("/user/saved", headers=candidate_headers)
        assert len(response.json()["saved_jobs"]) == 1

        response = client.get("/user/saved", headers=second_candidate_headers)
        assert len(response.json()["saved_jobs"]) == 1
        assert response.json()["saved_jobs"][0]["job"]["title"] == "Job 0"

    def test_list_saved_jobs_ordered_by_saved_at(self, client, db, candidate, candidate_headers, multiple_jobs):
        """Saved jobs should be ordered by saved_at descending."""
        base_time = datetime.utcnow()
        for i, job in enumerate(multiple_jobs):
            db.add(SavedJob(user_id=candidate.id, job_id=job.id, saved_at=base_time + timedelta(minutes=i)))
        db.commit()

        data = client.get("/user/saved", headers=candidate_headers).json()
        assert data["saved_jobs"][0]["job"]["title"] == "Job 2"
        assert data["saved_jobs"][2]["job"]["title"] == "Job 0"


class TestSaveJob:
    """Tests for POST /user/saved/{job_id} endpoint."""

    def test_save_job_unauthenticated(self, client, job):
        assert client.post(f"/user/saved/{job.id}").status_code == 403

    def test_save_job_success(self, client, db, candidate, candidate_headers, job):
        response = client.post(f"/user/saved/{job.id}", headers=candidate_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Job saved"
        assert data["job_id"] == job.id

        saved = db.query(SavedJob).filter(
            SavedJob.user_id == candidate.id,
            SavedJob.job_id == job.id,
        ).first()
        assert saved is not None

    def test_save_job_idempotent(self, client, db, candidate_headers, saved_job, job):
        """Saving an already-saved job should be idempotent."""
        response = client.post(f"/user/saved/{job.id}", headers=candidate_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Job already saved"
        assert db.query(SavedJob).count() == 1

    def test_save_nonexistent_job(self, client, candidate_headers):
        response = client.post("/user/saved/99999", headers=candidate_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Job not found"

    def test_recruiter_can_bookmark(self, client, recruiter_headers, job):
        response = client.post(f"/user/saved/{job.id}", headers=recruiter_headers)
        assert response.status_code == 200

    def test_save_job_saved_concurrently(
        self, client, db, monkeypatch, hide_existing, candidate_headers, saved_job, job
    ):
        hide_existing(SavedJob)

        response = client.post(f"/user/saved/{job.id}", headers=candidate_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Job already saved"

        monkeypatch.undo()
        assert db.query(SavedJob).count() == 1

    def test_save_job_for_deleted_user(self, client, db, candidate, candidate_headers, job):
        db.delete(candidate)
        db.commit()

        response = client.post(f"/user/saved/{job.id}", headers=candidate_headers)
        assert response.status_code == 404
        assert response.json()["success"] is False
        assert response.json()["message"] == "User not found"
        assert db.query(SavedJob).count() == 0

    @pytest.mark.parametrize("job_id", ["0", "-1", "99999999999999999999"])
    def test_save_job_id_out_of_range(self, client, candidate_headers, job_id):
        response = client.post(f"/user/saved/{job_id}", headers=candidate_headers)
        assert response.status_code == 400


class TestUnsaveJob:
    """Tests for DELETE /user/saved/{job_id} endpoint."""

    def test_unsave_job_success(self, client, db, candidate_headers, saved_job, job):
        response = client.delete(f"/user/saved/{job.id}", headers=candidate_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Job unsaved"
        assert db.query(SavedJob).count() == 0

    def test_unsave_not_saved(self, client, candidate_headers, job):
        response = client.delete(f"/user/saved/{job.id}", headers=candidate_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Job was not saved"

    def test_unsave_only_affects_own_bookmark(
        self, client, db, second_candidate_headers, saved_job, job
    ):
        response = client.delete(f"/user/saved/{job.id}", headers=second_candidate_headers)
        assert response.json()["message"] == "Job was not saved"
        assert db.query(SavedJob).count() == 1
