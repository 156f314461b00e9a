import io
import zipfile

from fastapi.testclient import TestClient

from classfinder.api import app


def _make_zip_bytes() -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr(
            "repo/src/Base.php",
            "<?php\nnamespace App;\nclass Base {}\n",
        )
        archive.writestr(
            "repo/src/Child.php",
            "<?php\nnamespace App;\n\nuse My\\Traits\\Loggable as Log;\n\n"
            "class Child extends Base\n{\n    use Log;\n}\n",
        )
    return buffer.getvalue()


def test_health() -> None:
    client = TestClient(app)

    assert client.get("/health").json() == {"status": "ok"}


def test_find_endpoint() -> None:
    client = TestClient(app)

    response = client.post(
        "/find?target=App%5CBase&relation=extends",
        files={"file": ("repo.zip", _make_zip_bytes(), "application/zip")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert data["relation"] == "extends"
    record = data["results"][0]
    assert record["class"] == "App\\Child"
    assert record["file"] == "src/Child.php"
    assert record["traits"] == ["My\\Traits\\Loggable"]


def test_find_by_trait_endpoint() -> None:
    client = TestClient(app)

    response = client.post(
        "/find?target=my%5Ctraits%5Cloggable&relation=traits",
        files={"file": ("repo.zip", _make_zip_bytes(), "application/zip")},
    )
    assert response.status_code == 200
    assert [item["class"] for item in response.json()["results"]] == ["App\\Child"]


def test_graph_endpoint() -> None:
    client = TestClient(app)

    response = client.post(
        "/graph",
        files={"file": ("repo.zip", _make_zip_bytes(), "application/zip")},
    )
    assert response.status_code == 200
    data = response.json()
    assert "nodes" in data
    assert "links" in data or "edges" in data
    paths = {node.get("path") for node in data["nodes"]}
    assert "src/Child.php" in paths


def test_find_rejects_non_zip() -> None:
    client = TestClient(app)
    response = client.post(
        "/find?target=App%5CBase",
        files={"file": ("repo.txt", b"not zip", "text/plain")},
    )
    assert response.status_code == 400


def test_find_rejects_corrupt_zip() -> None:
    client = TestClient(app)
    response = client.post(
        "/find?target=App%5CBase",
        files={"file": ("repo.zip", b"not really a zip", "application/zip")},
    )
    assert response.status_code == 400


def test_find_requires_upload() -> None:
    client = TestClient(app)
    response = client.post("/find?target=App%5CBase")
    assert response.status_code == 400


def test_find_rejects_unknown_relation() -> None:
    client = TestClient(app)
    response = client.post(
        "/find?target=App%5CBase&relation=uses",
        files={"file": ("repo.zip", _make_zip_bytes(), "application/zip")},
    )
    assert response.status_code == 422
