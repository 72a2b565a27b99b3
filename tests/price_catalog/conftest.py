import json

import pytest


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON (or raw text) category file into a temp price dir."""
    price_dir = tmp_path / "categorias_precios"
    price_dir.mkdir()

    def _write(name, content):
        path = price_dir / name
        text = content if isinstance(content, str) else json.dumps(content, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path

    _write.dir = price_dir
    return _write
