"""API tests for profile and watchlist endpoints."""


class TestProfileEndpoints:

    def test_get_profile(self, client, auth_headers):
        response = client.get("/api/users/profile", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["email"] == "viewer@example.com"
        assert data["username"] == "viewer"
        assert data["isVerified"] is True
        assert data["authProvider"] == "local"
        assert data["watchlistCount"] == 0
        assert "createdAt" in data

    def test_update_profile(self, client, auth_headers):
        response = client.put("/api/users/profile", json={"name": "cinephile"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["username"] == "cinephile"
        assert client.get("/api/users/profile", headers=auth_headers).json()["data"]["username"] == "cinephile"

    def test_update_profile_validation(self, client, auth_headers):
        response = client.put("/api/users/profile", json={"name": "ab"}, headers=auth_headers)
        assert response.status_code == 400


class TestWatchlistEndpoints:

    def add(self, client, headers, movie_id, title, **extra):
        return client.post("/api/watchlist", json={"movieId": movie_id, "title": title, **extra}, headers=headers)

    def test_requires_authentication(self, client):
        assert client.get("/api/watchlist").status_code == 401

    def test_add_and_list(self, client, auth_headers):
        response = self.add(client, auth_headers, 550, "Fight Club", year=1999, genre=["Drama"])

        assert response.status_code == 201
        item = response.json()["data"]
        assert item["movieId"] == "550"
        assert item["watched"] is False
        assert "addedAt" in item

        listing = client.get("/api/watchlist", headers=auth_headers).json()["data"]
        assert listing["count"] == 1
        assert listing["watchlist"][0]["title"] == "Fight Club"

    def test_duplicate(self, client, auth_headers):
        self.add(client, auth_headers, "550", "Fight Club")
        response = self.add(client, auth_headers, "550", "Fight Club")

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_update_and_stats(self, client, auth_headers):
        self.add(client, auth_headers, "1", "Heat", year=1995, genre=["Crime"])
        self.add(client, auth_headers, "2", "Ronin", year=1998, genre=["Action"])

        response = client.put(
            "/api/watchlist/1",
            json={"watched": True, "userRating": 9, "notes": "classic"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["data"]["userRating"] == 9

        stats = client.get("/api/watchlist/stats", headers=auth_headers).json()["data"]
        assert stats["totalMovies"] == 2
        assert stats["watchedMovies"] == 1
        assert stats["unwatchedMovies"] == 1
        assert stats["averageRating"] == 9
        assert stats["watchedPercentage"] == 50
        assert stats["genreDistribution"] == {"Crime": 1, "Action": 1}
        assert len(stats["recentlyAdded"]) == 2

    def test_rating_out_of_range(self, client, auth_headers):
        self.add(client, auth_headers, "1", "Heat")
        response = client.put("/api/watchlist/1", json={"userRating": 11}, headers=auth_headers)
        assert response.status_code == 400

    def test_remove_and_clear(self, client, auth_headers):
        self.add(client, auth_headers, "1", "Heat")
        self.add(client, auth_headers, "2", "Ronin")

        removed = client.delete("/api/watchlist/1", headers=auth_headers)
        assert removed.status_code == 200
        assert removed.json()["data"]["title"] == "Heat"
        assert client.delete("/api/watchlist/1", headers=auth_headers).status_code == 404

        cleared = client.delete("/api/watchlist", headers=auth_headers)
        assert cleared.json()["data"] == {"removedCount": 1}
        assert client.get("/api/users/profile", headers=auth_headers).json()["data"]["watchlistCount"] == 0

    def test_null_clears_rating_and_notes(self, client, auth_headers):
        self.add(client, auth_headers, "1", "Heat")
        client.put("/api/watchlist/1", json={"userRating": 8, "notes": "great"}, headers=auth_headers)

        response = client.put("/api/watchlist/1", json={"userRating": None, "notes": None}, headers=auth_headers)

        assert response.status_code == 200
        item = response.json()["data"]
        assert item["userRating"] is None
        assert item["notes"] is None

    def test_search(self, client, auth_headers):
        self.add(client, auth_headers, "1", "Heat", year=1995, genre=["Crime"])
        self.add(client, auth_headers, "2", "Ronin", year=1998, genre=["Action"])
        client.put("/api/watchlist/2", json={"watched": True}, headers=auth_headers)

        response = client.get(
            "/api/watchlist/search",
            params={"watched": "true", "sortBy": "title", "sortOrder": "asc"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert [movie["movieId"] for movie in data["movies"]] == ["2"]
        assert data["count"] == 1
        assert data["totalCount"] == 2

        by_query = client.get("/api/watchlist/search", params={"query": "heat"}, headers=auth_headers)
        assert [movie["title"] for movie in by_query.json()["data"]["movies"]] == ["Heat"]

    def test_search_rejects_unknown_sort_field(self, client, auth_headers):
        response = client.get("/api/watchlist/search", params={"sortBy": "popularity"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "sortBy"


class TestUserAccountEndpoints:

    def test_preferences(self, client, auth_headers):
        defaults = client.get("/api/users/preferences", headers=auth_headers)
        assert defaults.status_code == 200
        assert defaults.json()["data"] == {"favoriteGenres": [], "language": "en", "notifications": True}

        updated = client.put(
            "/api/users/preferences",
            json={"favoriteGenres": ["Drama"], "notifications": False},
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["message"] == "Preferences updated successfully"
        assert updated.json()["data"] == {"favoriteGenres": ["Drama"], "language": "en", "notifications": False}

    def test_avatar(self, client, auth_headers):
        response = client.post("/api/users/avatar", json={"avatarUrl": "https://img.example.com/me.png"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"avatar": "https://img.example.com/me.png"}
        profile = client.get("/api/users/profile", headers=auth_headers).json()["data"]
        assert profile["picture"] == "https://img.example.com/me.png"

    def test_stats(self, client, auth_headers):
        client.post("/api/watchlist", json={"movieId": "1", "title": "Heat", "rating": 8}, headers=auth_headers)
        client.put("/api/watchlist/1", json={"watched": True}, headers=auth_headers)

        response = client.get("/api/users/stats", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["watchlistCount"] == 1
        assert data["totalMoviesWatched"] == 1
        assert data["averageRating"] == 8
        assert "memberSince" in data

    def test_requires_authentication(self, client):
        assert client.get("/api/users/preferences").status_code == 401
        assert client.get("/api/users/stats").status_code == 401
