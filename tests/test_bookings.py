booking_data = {
    "email": "patient@example.com",
    "appointmentDate": "2023-01-01",
    "treatment": "Cleaning",
    "slot": "9am",
    "patient": "Pat Ient",
    "phone": "0123456789",
    "price": 25
}

class TestCreateBooking:

    def test_create_booking(self, client):
        response = client.post("/bookings", json=booking_data)
        assert response.status_code == 200

        data = response.json()
        assert data["acknowledged"] is True
        assert data["insertedId"]

    def test_duplicate_booking_rejected(self, client, patient_headers):
        """Same email, date and treatment is refused whatever the slot."""
        client.post("/bookings", json=booking_data)

        duplicate = dict(booking_data, slot="10am")
        response = client.post("/bookings", json=duplicate)
        assert response.status_code == 200
        assert response.json() == {
            "acknowledged": False,
            "message": "You already have a booking on 2023-01-01"
        }

        bookings = client.get(
            "/bookings", params={"email": "patient@example.com"}, headers=patient_headers
        ).json()
        assert len(bookings) == 1
        assert bookings[0]["slot"] == "9am"

    def test_other_treatment_same_day_allowed(self, client):
        client.post("/bookings", json=booking_data)

        response = client.post("/bookings", json=dict(booking_data, treatment="Teeth Whitening"))
        assert response.json()["acknowledged"] is True

    def test_same_slot_different_patient_allowed(self, client):
        client.post("/bookings", json=booking_data)

        response = client.post("/bookings", json=dict(booking_data, email="other@example.com"))
        assert response.json()["acknowledged"] is True

    def test_missing_required_field(self, client):
        invalid_data = dict(booking_data)
        del invalid_data["treatment"]

        response = client.post("/bookings", json=invalid_data)
        assert response.status_code == 422

class TestListBookings:

    def test_list_own_bookings(self, client, patient_headers):
        client.post("/bookings", json=dict(booking_data, note="first visit"))
        client.post("/bookings", json=dict(booking_data, email="other@example.com"))

        response = client.get(
            "/bookings", params={"email": "patient@example.com"}, headers=patient_headers
        )
        assert response.status_code == 200

        data = response.json()
        assert len(data) == 1
        assert data[0]["email"] == "patient@example.com"
        assert data[0]["appointmentDate"] == "2023-01-01"
        assert data[0]["patient"] == "Pat Ient"
        assert data[0]["note"] == "first visit"

    def test_missing_authorization_header(self, client):
        response = client.get("/bookings", params={"email": "patient@example.com"})
        assert response.status_code == 401

    def test_empty_authorization_header(self, client):
        headers = {"Authorization": ""}

        response = client.get("/bookings", params={"email": "patient@example.com"}, headers=headers)
        assert response.status_code == 401

    def test_invalid_token(self, client):
        headers = {"Authorization": "Bearer invalid_token"}

        response = client.get("/bookings", params={"email": "patient@example.com"}, headers=headers)
        assert response.status_code == 403

    def test_malformed_header(self, client):
        headers = {"Authorization": "invalid_token"}

        response = client.get("/bookings", params={"email": "patient@example.com"}, headers=headers)
        assert response.status_code == 403

    def test_other_users_bookings_forbidden(self, client, patient_headers):
        """A valid token does not grant access to another email's bookings."""
        response = client.get(
            "/bookings", params={"email": "other@example.com"}, headers=patient_headers
        )
        assert response.status_code == 403

    def test_missing_email_query_forbidden(self, client, patient_headers):
        response = client.get("/bookings", headers=patient_headers)
        assert response.status_code == 403

    def test_bookings_listed_in_creation_order(self, client, patient_headers):
        for treatment in ("Teeth Whitening", "Cleaning", "Orthodontics"):
            client.post("/bookings", json=dict(booking_data, treatment=treatment))

        response = client.get(
            "/bookings", params={"email": "patient@example.com"}, headers=patient_headers
        )
        assert [booking["treatment"] for booking in response.json()] == [
            "Teeth Whitening", "Cleaning", "Orthodontics"
        ]
