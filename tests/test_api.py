import io


def test_health_ok(client):
    """Test that the health check endpoint returns OK."""
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "version": "0.4.0"}


def test_convert_raw_body(client):
    response = client.post("/api/v1/convert", data="a,b\n1,2\n3,4\n",
                           content_type="text/csv")
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    assert response.get_json() == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]
    assert response.headers["X-Rows-Converted"] == "2"
    assert response.headers["X-Rows-Skipped"] == "0"


def test_convert_multipart_upload(client):
    data = {"csv_file": (io.BytesIO(b"\xef\xbb\xbfa,b\n1,2\n"), "parts.csv")}
    response = client.post("/api/v1/convert", data=data,
                           content_type="multipart/form-data")
    assert response.status_code == 200
    assert response.get_json() == [{"a": "1", "b": "2"}]


def test_multipart_without_file_is_rejected(client):
    response = client.post("/api/v1/convert", data={"other": "x"},
                           content_type="multipart/form-data")
    assert response.status_code == 400
    assert response.get_json() == {"error": "no csv_file in upload"}


def test_empty_body_is_rejected(client):
    response = client.post("/api/v1/convert", data=b"", content_type="text/csv")
    assert response.status_code == 400
    assert response.get_json() == {"error": "empty body"}


def test_bad_row_is_unprocessable(client):
    response = client.post("/api/v1/convert",
                           data="a,b,c\n1,2,3\nbad,line\nz,y,x\n",
                           content_type="text/csv")
    assert response.status_code == 422
    body = response.get_json()
    assert body["line"] == 3
    assert "wrong number of fields" in body["error"]


def test_skip_errors_reports_skipped_rows(client):
    response = client.post("/api/v1/convert?skip_errors=1",
                           data="a,b,c\n1,2,3\nbad,line\nz,y,x\n",
                           content_type="text/csv")
    assert response.status_code == 200
    assert response.get_json() == [
        {"a": "1", "b": "2", "c": "3"},
        {"a": "z", "b": "y", "c": "x"},
    ]
    assert response.headers["X-Rows-Skipped"] == "1"


def test_forced_columns(client):
    response = client.post("/api/v1/convert?columns=x,y,z",
                           data="a,b,c\n1,2,3\n", content_type="text/csv")
    assert response.get_json() == [
        {"x": "a", "y": "b", "z": "c"},
        {"x": "1", "y": "2", "z": "3"},
    ]


def test_indent(client):
    response = client.post("/api/v1/convert?indent=2", data="a\n1\n",
                           content_type="text/csv")
    assert response.get_data(as_text=True) == '[\n  {\n    "a": "1"\n  }\n]\n'


def test_body_over_limit_is_rejected(app, client):
    app.config["MAX_CONTENT_LENGTH"] = 10
    response = client.post("/api/v1/convert", data="a,b\n" + "1,2\n" * 10,
                           content_type="text/csv")
    assert response.status_code == 413
    assert response.get_json() == {"error": "request body too large"}


def test_wrong_method(client):
    response = client.get("/api/v1/convert")
    assert response.status_code == 405
    assert response.get_json() == {"error": "method not allowed"}


def test_unknown_route(client):
    response = client.get("/api/v1/nothing")
    assert response.status_code == 404


def test_report_instead_of_records(client):
    response = client.post("/api/v1/convert?skip_errors=1&report=1",
                           data='a,b\n1,2\n3,x"y\n4\n',
                           content_type="text/csv")
    assert response.status_code == 200
    report = response.get_json()
    assert report["columns"] == ["a", "b"]
    assert report["total_rows"] == 3
    assert report["converted"] == 1
    assert report["skipped"] == 2
    assert [e["line"] for e in report["errors"]] == [3, 4]


def test_total_rows_header(client):
    response = client.post("/api/v1/convert?skip_errors=1",
                           data="a,b\n1,2\nbad\n", content_type="text/csv")
    assert response.headers["X-Rows-Total"] == "2"
    assert response.headers["X-Rows-Converted"] == "1"
