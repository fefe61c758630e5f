doctor_data = {
    "name": "Dr. Jane Doe",
    "email": "jane@example.com",
    "specialty": "Cleaning",
    "image": "https://example.com/jane.png"
}

class TestDoctors:

    def test_add_and_list_doctors(self, client, admin_headers):
        response = client.post("/doctors", json=doctor_data, headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["acknowledged"] is True

        response = client.get("/doctors", headers=admin_headers)
        assert response.status_code == 200

        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "Dr. Jane Doe"
        assert data[0]["specialty"] == "Cleaning"
        assert data[0]["_id"]

    def test_delete_doctor(self, client, admin_headers):
        doctor_id = client.post("/doctors", json=doctor_data, headers=admin_headers).json()["insertedId"]

        response = client.delete(f"/doctors/{doctor_id}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "deletedCount": 1}

        assert client.get("/doctors", headers=admin_headers).json() == []

    def test_delete_unknown_doctor(self, client, admin_headers):
        response = client.delete("/doctors/missing", headers=admin_headers)
        assert response.json() == {"acknowledged": True, "deletedCount": 0}

    def test_missing_required_field(self, client, admin_headers):
        response = client.post("/doctors", json={"name": "Dr. No Specialty"}, headers=admin_headers)
        assert response.status_code == 422

    def test_requires_authorization_header(self, client):
        assert client.get("/doctors").status_code == 401
        assert client.post("/doctors", json=doctor_data).status_code == 401
        assert client.delete("/doctors/anything").status_code == 401

    def test_non_admin_forbidden(self, client, patient_headers, admin_headers):
        doctor_id = client.post("/doctors", json=doctor_data, headers=admin_headers).json()["insertedId"]

        assert client.get("/doctors", headers=patient_headers).status_code == 403
        assert client.post("/doctors", json=doctor_data, headers=patient_headers).status_code == 403
        assert client.delete(f"/doctors/{doctor_id}", headers=patient_headers).status_code == 403
        assert len(client.get("/doctors", headers=admin_headers).json()) == 1
