import json

import pytest

from restspec.client import SpecClient
from restspec.spec import ApiSpec
from restspec.store import SpecStore

API_ROOT = "https://api.example.com"

FB_SPEC = {
    "name": "fb",
    "api_root": API_ROOT,
    "resources": [
        {
            "name": "search",
            "path": "/search",
            "methods": ["get"],
            "params": {"q": "required"},
        },
        {
            "name": "user",
            "path": "/users/:id",
            "methods": ["get", "delete"],
            "params": {},
        },
        {
            "name": "user posts",
            "path": "/users/:id/posts",
            "methods": ["get", "post"],
            "params": {"title": "optional"},
        },
        {
            "name": "post",
            "path": "/posts/:post_id",
            "methods": ["put", "patch"],
            "params": {"body": "required"},
        },
    ],
}


@pytest.fixture
def fb_spec_dict():
    return json.loads(json.dumps(FB_SPEC))


@pytest.fixture
def fb_spec(fb_spec_dict):
    return ApiSpec.from_dict(fb_spec_dict)


@pytest.fixture
def spec_dir(tmp_path, fb_spec_dict):
    (tmp_path / "fb.json").write_text(json.dumps(fb_spec_dict), encoding="utf-8")
    return tmp_path


@pytest.fixture
def store(fb_spec):
    store = SpecStore()
    store.add(fb_spec)
    return store


@pytest.fixture
def client(store):
    return SpecClient(store=store)
