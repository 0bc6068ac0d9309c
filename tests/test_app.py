import io

import pytest

pytest.importorskip("flask")

from graybmp.app import create_app
from graybmp.grid import SampleGrid
from graybmp.infrastructure.bitmap import load_bitmap


@pytest.fixture
def client():
    app = create_app()
    app.testing = True
    return app.test_client()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["ok"] is True


def test_operations_lists_menu(client):
    operations = client.get("/operations").get_json()

    assert len(operations) == 18
    assert operations[1] == {
        "code": 2,
        "tag": "brightness",
        "label": "Brightness",
        "params": ["delta"],
    }


def test_transform_raw_body(client, gray_bmp, ramp_grid):
    response = client.post("/transform/inverse", data=gray_bmp)

    assert response.status_code == 200
    assert response.mimetype == "image/bmp"
    result = load_bitmap(response.data)
    assert list(result.grid.samples) == [255 - value for value in ramp_grid.samples]


def test_transform_multipart_upload(client, gray_bmp):
    response = client.post(
        "/transform/brightness?delta=300",
        data={"image": (io.BytesIO(gray_bmp), "input.bmp")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 200
    assert set(load_bitmap(response.data).grid.samples) == {255}


def test_transform_by_menu_code(client, gray_bmp):
    response = client.post("/transform/9", data=gray_bmp)

    assert response.status_code == 200


def test_gonzalez_threshold_header(client, encode_bmp):
    grid = SampleGrid.from_rows([[10, 10, 200, 200]])

    response = client.post("/transform/gonzalez-binarization", data=encode_bmp(grid))

    assert response.status_code == 200
    assert response.headers["X-Threshold"] == "105"


@pytest.mark.parametrize(
    "path",
    [
        "/transform/brightness",
        "/transform/contrast?factor=-2",
        "/transform/binarization?threshold=300",
        "/transform/emboss",
        "/transform/histogram",
    ],
)
def test_transform_rejects_bad_requests(client, gray_bmp, path):
    assert client.post(path, data=gray_bmp).status_code == 400


def test_transform_requires_image(client):
    assert client.post("/transform/inverse").status_code == 400


def test_transform_rejects_colour_bitmap(client, rgb_bmp):
    assert client.post("/transform/inverse", data=rgb_bmp).status_code == 400


def test_transform_rejects_truncated_upload(client, gray_bmp):
    assert client.post("/transform/inverse", data=gray_bmp[:-100]).status_code == 400


def test_histogram_rejects_truncated_upload(client, gray_bmp):
    assert client.post("/histogram", data=gray_bmp[:-100]).status_code == 400


def test_transform_never_fetches_a_source_url(client, gray_bmp, ramp_grid, monkeypatch):
    requests = pytest.importorskip("requests")

    def refuse(*args, **kwargs):
        raise AssertionError("the service must not fetch remote images")

    monkeypatch.setattr(requests.Session, "get", refuse)

    response = client.post(
        "/transform/inverse?source=http://169.254.169.254/latest/meta-data", data=gray_bmp
    )

    assert response.status_code == 200
    assert list(load_bitmap(response.data).grid.samples) == [255 - v for v in ramp_grid.samples]


def test_source_url_does_not_replace_upload(client):
    response = client.post("/transform/inverse?source=http://images.local/a.bmp")

    assert response.status_code == 400


def test_unrelated_query_arguments_are_ignored(client, gray_bmp):
    response = client.post("/transform/brightness?delta=5&settings=x", data=gray_bmp)

    assert response.status_code == 200


def test_histogram_endpoint(client, encode_bmp):
    grid = SampleGrid.from_rows([[3, 3, 40], [40, 40, 90]])

    payload = client.post("/histogram", data=encode_bmp(grid)).get_json()

    assert len(payload["histogram"]) == 256
    assert sum(payload["histogram"]) == 6
    assert payload["histogram"][40] == 3
    assert (payload["low"], payload["high"]) == (3, 90)
