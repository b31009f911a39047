class TestPlaceBid:
    def _job(self, client, make_job):
        return client.post("/add-jobs", json=make_job()).json()["insertedId"]

    def test_place_bid(self, client, make_job, make_bid):
        job_id = self._job(client, make_job)

        r = client.post("/add-bid", json=make_bid(job_id))
        assert r.status_code == 200
        assert r.json()["acknowledged"] is True
        assert len(r.json()["insertedId"]) == 24

    def test_duplicate_bid_conflicts(self, client, make_job, make_bid):
        job_id = self._job(client, make_job)

        assert client.post("/add-bid", json=make_bid(job_id)).status_code == 200
        r = client.post("/add-bid", json=make_bid(job_id, price=80))
        assert r.status_code == 400
        assert "already" in r.json()["detail"]

        assert client.get(f"/job/{job_id}").json()["bid_count"] == 1

    def test_same_seller_can_bid_on_other_jobs(self, client, make_job, make_bid):
        first = self._job(client, make_job)
        second = self._job(client, make_job)

        assert client.post("/add-bid", json=make_bid(first)).status_code == 200
        assert client.post("/add-bid", json=make_bid(second)).status_code == 200

    def test_bid_count_tracks_bids(self, client, make_job, make_bid):
        job_id = self._job(client, make_job)
        for i in range(3):
            r = client.post("/add-bid", json=make_bid(job_id, email=f"seller{i}@x.com"))
            assert r.status_code == 200

        assert client.get(f"/job/{job_id}").json()["bid_count"] == 3

    def test_bid_on_invalid_job_id(self, client, make_bid):
        r = client.post("/add-bid", json=make_bid("nope"))
        assert r.status_code == 400

    def test_status_defaults_to_pending(self, client, make_job, make_bid):
        job_id = self._job(client, make_job)
        bid = make_bid(job_id)
        del bid["status"]
        client.post("/add-bid", json=bid)

        client.post("/jwt", json={"email": "seller@x.com"})
        assert client.get("/bids/seller@x.com").json()[0]["status"] == "Pending"


class TestListBids:
    def _seed(self, client, make_job, make_bid):
        job_id = client.post("/add-jobs", json=make_job()).json()["insertedId"]
        client.post("/add-bid", json=make_bid(job_id, email="seller@x.com"))
        client.post("/add-bid", json=make_bid(job_id, email="other@x.com"))
        return job_id

    def test_requires_session(self, client):
        r = client.get("/bids/seller@x.com")
        assert r.status_code == 401

    def test_invalid_token_rejected(self, client):
        client.cookies.set("token", "garbage")
        r = client.get("/bids/seller@x.com")
        assert r.status_code == 401

    def test_seller_sees_own_bids(self, client, make_job, make_bid):
        job_id = self._seed(client, make_job, make_bid)
        client.post("/jwt", json={"email": "seller@x.com"})

        r = client.get("/bids/seller@x.com")
        assert r.status_code == 200
        bids = r.json()
        assert len(bids) == 1
        assert bids[0]["jobId"] == job_id
        assert bids[0]["email"] == "seller@x.com"
        assert bids[0]["price"] == 100

    def test_buyer_sees_bid_requests(self, client, make_job, make_bid):
        self._seed(client, make_job, make_bid)
        client.post("/jwt", json={"email": "buyer@x.com"})

        r = client.get("/bids/buyer@x.com?buyer=true")
        assert r.status_code == 200
        assert {b["email"] for b in r.json()} == {"seller@x.com", "other@x.com"}

        r = client.get("/bids/buyer@x.com?buyer=false")
        assert r.json() == []

    def test_empty_buyer_flag_lists_own_bids(self, client, make_job, make_bid):
        self._seed(client, make_job, make_bid)
        client.post("/jwt", json={"email": "seller@x.com"})

        r = client.get("/bids/seller@x.com?buyer=")
        assert r.status_code == 200
        assert [b["email"] for b in r.json()] == ["seller@x.com"]

        r = client.get("/bids/buyer@x.com?buyer=")
        assert r.status_code == 401

    def test_identity_mismatch_rejected(self, client, make_job, make_bid):
        self._seed(client, make_job, make_bid)
        client.post("/jwt", json={"email": "b@x.com"})

        r = client.get("/bids/a@x.com?buyer=true")
        assert r.status_code == 401

    def test_logout_revokes_access(self, client):
        client.post("/jwt", json={"email": "seller@x.com"})
        assert client.get("/bids/seller@x.com").status_code == 200

        client.get("/logout")
        assert client.get("/bids/seller@x.com").status_code == 401


class TestBidStatus:
    def test_update_status(self, client, make_job, make_bid):
        job_id = client.post("/add-jobs", json=make_job()).json()["insertedId"]
        bid_id = client.post("/add-bid", json=make_bid(job_id)).json()["insertedId"]

        r = client.patch(f"/bid-status-updated/{bid_id}", json={"status": "In Progress"})
        assert r.status_code == 200
        assert r.json()["matchedCount"] == 1
        assert r.json()["modifiedCount"] == 1

        client.post("/jwt", json={"email": "seller@x.com"})
        assert client.get("/bids/seller@x.com").json()[0]["status"] == "In Progress"

    def test_any_status_text_accepted(self, client, make_job, make_bid):
        job_id = client.post("/add-jobs", json=make_job()).json()["insertedId"]
        bid_id = client.post("/add-bid", json=make_bid(job_id)).json()["insertedId"]

        r = client.patch(f"/bid-status-updated/{bid_id}", json={"status": "On Hold"})
        assert r.status_code == 200
        assert r.json()["modifiedCount"] == 1

    def test_unknown_bid_is_noop(self, client):
        r = client.patch("/bid-status-updated/507f191e810c19729de860ea", json={"status": "Complete"})
        assert r.status_code == 200
        assert r.json()["matchedCount"] == 0

    def test_invalid_bid_id(self, client):
        r = client.patch("/bid-status-updated/xyz", json={"status": "Complete"})
        assert r.status_code == 400
