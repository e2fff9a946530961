import threading

import pytest
from werkzeug.serving import make_server

from shop_server.app import create_app


@pytest.fixture
def app():
    app = create_app({"TESTING": True, "CORS_ORIGINS": ["http://shop.example"]})
    yield app


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    with app.test_client() as c:
        yield c


@pytest.fixture
def valid_payment():
    """A valid payment payload."""
    return {
        "id": "1",
        "amount": 100.00,
        "cardNumber": "1234567812345678",
        "cardExpiry": "01/23",
        "cardCvv": "123",
    }


@pytest.fixture
def live_server(app):
    """Serve the app on an ephemeral port in a background thread."""
    server = make_server("127.0.0.1", 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}"
    server.shutdown()
    thread.join(timeout=5)
