from datetime import datetime

from fastapi.testclient import TestClient

from meetshare.main import app

client = TestClient(app)


class TestHealth:
    def test_health(self):
        response = client.get('/healthz')

        assert response.status_code == 200

        body = response.json()
        assert body['status'] == 'OK'
        assert datetime.fromisoformat(body['timestamp'].replace('Z', '+00:00')).tzinfo is not None

    def test_serves_index(self):
        response = client.get('/')

        assert response.status_code == 200
        assert 'summaries/v1/summarize' in response.text
