"""Integration tests for the Flask analyze endpoints."""

import io
import os
import sys

import pytest
import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

import app as app_module
from app import app, payload_session


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text


@pytest.fixture
def client():
    """Create a test client for the Flask app."""
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


@pytest.fixture(autouse=True)
def reset_session():
    """Start every test with an empty session and default config."""
    payload_session.set_payload("", None)
    original_limit = app.config['FRAME_LIMIT']
    original_stats = app.config['STATS_FILE']
    app.config['STATS_FILE'] = None
    yield
    payload_session.set_payload("", None)
    app.config['FRAME_LIMIT'] = original_limit
    app.config['STATS_FILE'] = original_stats


def upload(client, url, content, filename='capture.csv'):
    data = {'file': (io.BytesIO(content.encode('utf-8')), filename)}
    return client.post(url, data=data, content_type='multipart/form-data')


class TestAnalyzeApi:
    """Tests for POST /api/analyze."""

    def test_analyze_upload(self, client, profiler_payload):
        """An uploaded capture returns JSON results."""
        response = upload(client, '/api/analyze', profiler_payload)

        assert response.status_code == 200
        data = response.get_json()
        assert data['summary']['frame_count'] == 3
        assert data['frame_series']['physics_time'] == [3.5, 5.0, 1.0]
        assert payload_session.last_payload == profiler_payload

    def test_missing_file(self, client):
        """Requests without a file are rejected."""
        response = client.post('/api/analyze', data={}, content_type='multipart/form-data')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'No file provided'

    def test_invalid_extension(self, client, simple_payload):
        """Only CSV uploads are accepted."""
        response = upload(client, '/api/analyze', simple_payload, filename='capture.json')

        assert response.status_code == 400
        assert 'Only CSV' in response.get_json()['error']

    def test_empty_file(self, client):
        """An empty capture is reported without running the analysis."""
        response = upload(client, '/api/analyze', '')

        assert response.status_code == 400
        assert response.get_json()['error'] == 'File is empty'

    def test_upload_analyzed_while_session_locked(self, client, monkeypatch, profiler_payload, simple_payload):
        """The uploaded payload is stored and analyzed in one locked step."""
        real_build = app_module.build_analyzer

        def competing_upload():
            assert payload_session.lock.locked()
            assert payload_session.last_payload == profiler_payload
            payload_session.set_payload(simple_payload, 'other.csv')
            return real_build()

        monkeypatch.setattr(app_module, 'build_analyzer', competing_upload)

        data = upload(client, '/api/analyze', profiler_payload).get_json()

        assert data['summary']['frame_count'] == 3
        assert data['frame_series']['physics_time'] == [3.5, 5.0, 1.0]

    def test_frame_limit_config(self, client, profiler_payload):
        """FRAME_LIMIT caps processed frames."""
        app.config['FRAME_LIMIT'] = 2
        data = upload(client, '/api/analyze', profiler_payload).get_json()

        assert data['frame_series']['frame_numbers'] == [0, 1]

    def test_stats_file_config(self, client, tmp_path, simple_payload):
        """STATS_FILE replaces the built-in stat definitions."""
        stats_file = tmp_path / 'stats.json'
        stats_file.write_text(
            '{"stats": [{"displayName": "GT", "addLabels": ["GameThreadTime"]}]}',
            encoding='utf-8'
        )
        app.config['STATS_FILE'] = str(stats_file)

        data = upload(client, '/api/analyze', simple_payload).get_json()

        assert [s['name'] for s in data['aggregate_stats']] == ['GT']
        assert data['aggregate_stats'][0]['summary']['average'] == 10.0
        assert data['aggregate_stats'][0]['summary']['median'] == 14.0


class TestRemoteAnalyzeApi:
    """Tests for GET /api/analyze."""

    def test_nothing_loaded(self, client):
        """Without a payload there is nothing to analyze."""
        response = client.get('/api/analyze')

        assert response.status_code == 404

    def test_remote_csv(self, client, monkeypatch, simple_payload):
        """The csv query parameter is fetched and analyzed."""
        monkeypatch.setattr(requests, 'get', lambda url, timeout=None: FakeResponse(200, simple_payload))

        response = client.get('/api/analyze?csv=http://example.test/capture.csv')

        assert response.status_code == 200
        assert response.get_json()['summary']['frame_count'] == 2

    def test_remote_fetch_timeout(self, client, monkeypatch, simple_payload):
        """Remote fetches use the session timeout set at startup."""
        seen = []

        def fake_get(url, timeout=None):
            seen.append(timeout)
            return FakeResponse(200, simple_payload)

        monkeypatch.setattr(requests, 'get', fake_get)
        monkeypatch.setattr(payload_session, 'fetch_timeout', 5.0)

        client.get('/api/analyze?csv=http://example.test/capture.csv')

        assert seen == [5.0]

    def test_failed_fetch_uses_last_payload(self, client, monkeypatch, simple_payload):
        """A failed fetch falls back to the last loaded payload."""
        payload_session.set_payload(simple_payload, 'earlier.csv')

        def fake_get(url, timeout=None):
            raise requests.Timeout("too slow")

        monkeypatch.setattr(requests, 'get', fake_get)

        response = client.get('/api/analyze?csv=http://example.test/capture.csv')

        assert response.status_code == 200
        assert response.get_json()['warnings'][0].startswith('WARNING : Final headers')


class TestWebPages:
    """Tests for the HTML pages."""

    def test_index(self, client):
        """The upload form renders."""
        response = client.get('/')

        assert response.status_code == 200
        assert b'file-input' in response.data

    def test_analyze_web(self, client, profiler_payload):
        """An upload renders the results page."""
        response = upload(client, '/analyze', profiler_payload)

        assert response.status_code == 200
        assert b'Frame Time - (2% : 9.00ms' in response.data

    def test_analyze_web_error(self, client):
        """Upload errors are shown on the form."""
        response = client.post('/analyze', data={}, content_type='multipart/form-data')

        assert response.status_code == 200
        assert b'No file provided' in response.data

    def test_results_frame_table(self, client, profiler_payload):
        """The results page lists per-frame values."""
        response = upload(client, '/analyze', profiler_payload)

        assert b'<table class="frames">' in response.data
        assert b'3.500 ms' in response.data

    def test_remote_csv_page(self, client, monkeypatch, simple_payload):
        """The csv query parameter on the index renders results."""
        monkeypatch.setattr(requests, 'get', lambda url, timeout=None: FakeResponse(200, simple_payload))

        response = client.get('/?csv=http://example.test/capture.csv')

        assert response.status_code == 200
        assert b'http://example.test/capture.csv' in response.data

    def test_remote_csv_page_error(self, client, monkeypatch, tmp_path, simple_payload):
        """Analysis failures for a remote trace are shown on the form."""
        app.config['STATS_FILE'] = str(tmp_path / 'absent.json')
        monkeypatch.setattr(requests, 'get', lambda url, timeout=None: FakeResponse(200, simple_payload))

        response = client.get('/?csv=http://example.test/capture.csv')

        assert response.status_code == 200
        assert b'Error analyzing file' in response.data
