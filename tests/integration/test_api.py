"""Integration tests for API endpoints"""

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/health-score", json={"total_income": 1000, "total_expense": 500, "savings_rate": 50})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "fin_health_score" in response.text
    assert "fin_parsed_transactions" in response.text


def test_parse_endpoint(client: TestClient):
    """Test POST /v1/transactions/parse with a food expense"""
    response = client.post("/v1/transactions/parse", json={"text": "Spent 500 on lunch at Zomato"})

    assert response.status_code == 200
    data = response.json()
    assert data["amount"] == 500
    assert data["type"] == "expense"
    assert data["category"] == "Food & Dining"
    assert data["description"] == "Spent on lunch at Zomato"
    assert response.headers["X-Request-ID"]


def test_parse_endpoint_income(client: TestClient):
    """Test income drafts are serialised with their decimal amount"""
    response = client.post("/v1/transactions/parse", json={"text": "Received salary ₹50,000.75"})

    assert response.status_code == 200
    data = response.json()
    assert data["amount"] == 50000.75
    assert data["type"] == "income"
    assert data["category"] == "Salary"


def test_parse_endpoint_no_match(client: TestClient):
    """Test unrecognised text is a fallback draft, not an error"""
    response = client.post("/v1/transactions/parse", json={"text": "hello"})

    assert response.status_code == 200
    data = response.json()
    assert data["amount"] == 0
    assert data["category"] == "Other"
    assert data["type"] == "expense"
    assert data["description"] == "hello"


def test_parse_endpoint_rejects_empty_text(client: TestClient):
    response = client.post("/v1/transactions/parse", json={"text": ""})
    assert response.status_code == 422


def test_parse_endpoint_rejects_long_text(client: TestClient):
    response = client.post("/v1/transactions/parse", json={"text": "a" * 501})
    assert response.status_code == 422


def test_categories_endpoint(client: TestClient):
    """Test GET /v1/transactions/categories lists categories in matching order"""
    response = client.get("/v1/transactions/categories")

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert len(categories) == 17
    assert categories[0] == "Food & Dining"
    assert categories[-1] == "Other"


def test_health_score_endpoint(client: TestClient):
    """Test POST /v1/health-score for a strong snapshot"""
    response = client.post(
        "/v1/health-score",
        json={"total_income": 100000, "total_expense": 40000, "savings_rate": 60},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 100
    assert data["status"] == "Excellent"
    assert data["spending_ratio"] == 40
    assert data["message"] == "Your finances are in great shape!"


def test_health_score_endpoint_critical(client: TestClient):
    response = client.post(
        "/v1/health-score",
        json={"total_income": 50000, "total_expense": 55000, "savings_rate": -10},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 30
    assert data["status"] == "Critical"


def test_health_score_endpoint_missing_field(client: TestClient):
    response = client.post("/v1/health-score", json={"total_income": 1000, "total_expense": 500})
    assert response.status_code == 422


def test_request_id_is_propagated(client: TestClient):
    """Test a caller-supplied X-Request-ID is echoed back"""
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_health_score_endpoint_huge_ratio(client: TestClient):
    """Test finite but extreme figures are scored, not a server error"""
    response = client.post(
        "/v1/health-score",
        json={"total_income": 1, "total_expense": 1e307, "savings_rate": 0},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 50
    assert data["spending_ratio"] == 10**309


def test_parse_endpoint_rejects_unrepresentable_amount(client: TestClient):
    """Test an amount too large for a JSON number is refused instead of sent as null"""
    response = client.post("/v1/transactions/parse", json={"text": "9" * 400})

    assert response.status_code == 422
