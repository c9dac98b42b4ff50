import pytest

from storefront.domain.errors import ValidationError
from storefront.services import asset_storage
from storefront.services.asset_storage import AssetStorage


def test_same_millisecond_uploads_do_not_collide(tmp_path, monkeypatch):
    monkeypatch.setattr(asset_storage.time, "time", lambda: 1700000000.123)
    storage = AssetStorage(directory=str(tmp_path), base_url="http://testserver/")

    first = storage.save("product", "a.png", b"first")
    second = storage.save("product", "b.png", b"second")

    assert first != second
    for url, data in [(first, b"first"), (second, b"second")]:
        assert url.startswith("http://testserver/images/product_1700000000123_")
        assert url.endswith(".png")
        assert (tmp_path / url.rsplit("/", 1)[1]).read_bytes() == data


def test_empty_upload_rejected(tmp_path):
    with pytest.raises(ValidationError):
        AssetStorage(directory=str(tmp_path)).save("product", "a.png", b"")
