import pytest

from main import create_app


@pytest.fixture
def app():
    """Return a Flask app configured for testing."""
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture
def csv_file(tmp_path):
    """Write CSV content to a temp file and return its path."""
    def _write(content: str | bytes, name: str = "input.csv"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write
