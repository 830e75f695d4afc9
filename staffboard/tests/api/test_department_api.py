import uuid

from fastapi.testclient import TestClient

# Department API tests


def test_health_endpoints(client: TestClient):
    assert client.get("/").status_code == 200
    assert client.get("/health").json() == {"ok": True}


def test_create_department_returns_201_with_camel_case_body(client: TestClient):
    response = client.post("/api/departments", json={"name": "Engineering", "description": "Core team"})

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Engineering"
    assert data["description"] == "Core team"
    assert data["employeeCount"] == 0
    uuid.UUID(data["id"])

    fetched = client.get(f"/api/departments/{data['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Engineering"


def test_create_department_validation_error_envelope(client: TestClient):
    response = client.post("/api/departments", json={"name": "", "description": "x" * 1001})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert {"property": "name", "message": "Department name is required"} in body["errors"]
    assert {"property": "description", "message": "Description cannot exceed 1000 characters"} in body["errors"]


def test_create_duplicate_department_is_rejected(client: TestClient, make_department):
    make_department(name="Sales")

    response = client.post("/api/departments", json={"name": "sales"})

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"property": "name", "message": "A department with this name already exists."}
    ]


def test_list_departments_envelope(client: TestClient, make_department):
    for i in range(12):
        make_department(name=f"Team {i:02d}")

    response = client.get("/api/departments", params={"pageNumber": 2, "pageSize": 5})

    assert response.status_code == 200
    body = response.json()
    assert [d["name"] for d in body["items"]] == [f"Team {i:02d}" for i in range(5, 10)]
    assert body["pageNumber"] == 2
    assert body["pageSize"] == 5
    assert body["totalCount"] == 12
    assert body["totalPages"] == 3
    assert body["hasPreviousPage"] is True
    assert body["hasNextPage"] is True


def test_list_defaults_to_first_page_of_ten(client: TestClient, make_department):
    for i in range(11):
        make_department(name=f"Unit {i:02d}")

    body = client.get("/api/departments").json()

    assert body["pageNumber"] == 1
    assert body["pageSize"] == 10
    assert len(body["items"]) == 10


def test_invalid_paging_parameters_are_rejected(client: TestClient):
    assert client.get("/api/departments", params={"pageSize": 0}).status_code == 400
    assert client.get("/api/departments", params={"pageSize": 101}).status_code == 400
    response = client.get("/api/departments", params={"pageNumber": 0})
    assert response.status_code == 400
    assert response.json()["errors"][0]["property"] == "pageNumber"


def test_get_unknown_department_returns_404(client: TestClient):
    missing = uuid.uuid4()
    response = client.get(f"/api/departments/{missing}")

    assert response.status_code == 404
    assert response.json() == {"message": f"Department with ID {missing} not found"}


def test_malformed_id_returns_400(client: TestClient):
    response = client.get("/api/departments/not-a-guid")
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_search_requires_term(client: TestClient):
    for params in ({}, {"q": ""}, {"q": "   "}):
        response = client.get("/api/departments/search", params=params)
        assert response.status_code == 400
        assert response.json() == {"message": "Search term is required"}


def test_search_departments(client: TestClient, make_department):
    make_department(name="Engineering")
    make_department(name="Sales", description="Enterprise accounts")
    make_department(name="Legal")

    body = client.get("/api/departments/search", params={"q": "en"}).json()

    assert [d["name"] for d in body["items"]] == ["Engineering", "Sales"]


def test_update_department_uses_route_id(client: TestClient, make_department):
    department = make_department(name="Old")
    other = make_department(name="Other")

    response = client.put(
        f"/api/departments/{department.id}",
        json={"id": str(other.id), "name": "Old", "description": "Same name, new description"},
    )

    assert response.status_code == 200
    assert response.json()["id"] == str(department.id)
    assert response.json()["description"] == "Same name, new description"
    assert client.get(f"/api/departments/{other.id}").json()["name"] == "Other"


def test_update_unknown_department_returns_404(client: TestClient):
    response = client.put(f"/api/departments/{uuid.uuid4()}", json={"name": "Ghost"})
    assert response.status_code == 404


def test_delete_department(client: TestClient, make_department):
    department = make_department(name="Temporary")

    response = client.delete(f"/api/departments/{department.id}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(f"/api/departments/{department.id}").status_code == 404
    assert client.delete(f"/api/departments/{department.id}").status_code == 404


def test_department_employees(client: TestClient, make_department, make_employee):
    department = make_department(name="Backend Developing")
    make_employee(first_name="Panagiotis", last_name="Stavrakellis", department=department)
    make_employee(first_name="Nikolaos", last_name="Papadopoulos", department=department)

    response = client.get(f"/api/departments/{department.id}/employees")

    assert response.status_code == 200
    items = response.json()["items"]
    assert [e["lastName"] for e in items] == ["Papadopoulos", "Stavrakellis"]
    assert items[0]["departmentName"] == "Backend Developing"
    assert client.get(f"/api/departments/{department.id}").json()["employeeCount"] == 2


def test_collection_route_has_no_trailing_slash(client: TestClient, make_department):
    make_department(name="Sales")

    response = client.get("/api/departments", follow_redirects=False)

    assert response.status_code == 200
    assert response.json()["totalCount"] == 1


def test_create_sets_location_header(client: TestClient):
    response = client.post("/api/departments", json={"name": "Engineering"}, follow_redirects=False)

    assert response.status_code == 201
    location = response.headers["location"]
    assert location.endswith(f"/api/departments/{response.json()['id']}")
    assert client.get(location).json()["name"] == "Engineering"
