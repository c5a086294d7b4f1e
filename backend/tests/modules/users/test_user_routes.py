"""Tests for GET /api/v1/user/all-users."""


class TestAllUsers:
    def test_admin_lists_users(self, client, user_repository, admin_headers):
        listed = [{"_id": "1", "name": "Sheen"}, {"_id": "2", "name": "Admin"}]
        user_repository.list_users.return_value = listed

        response = client.get("/api/v1/user/all-users", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "All users fetched successfully",
            "users": listed,
        }

    def test_regular_user_rejected(self, client, user_repository, user_headers):
        response = client.get("/api/v1/user/all-users", headers=user_headers)
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized Access"
        user_repository.list_users.assert_not_called()

    def test_failure(self, client, user_repository, admin_headers):
        user_repository.list_users.side_effect = RuntimeError("cursor died")
        response = client.get("/api/v1/user/all-users", headers=admin_headers)
        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Error in getting all users"
