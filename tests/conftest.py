"""Test fixtures: test app wired like create_app(), with settings passed in explicitly."""
import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from translit.api.routes import router as translit_router
from translit.service import TransliterationService
from translit.settings import Settings
from translit.text.normalize import TextNormalizer
from translit.text.registry import RuleRegistry
from translit.text.rule_table import RuleTable
from translit.text.script_router import ScriptRouter


def create_test_app(*, require_auth: bool = False, rules_dir: str | None = None, builtin_tables: bool = True,
                    max_input_chars: int = 1000) -> FastAPI:
    """Creates a FastAPI test app with built-in tables and optional rule files."""
    app = FastAPI(title="Transliteration Test", version="0.1.0")
    app.include_router(translit_router)

    settings = Settings(
        require_auth=require_auth,
        api_key="test-secret-key",
        rules_dir=rules_dir,
        builtin_tables=builtin_tables,
        max_input_chars=max_input_chars,
    )
    registry = RuleRegistry(rules_dir=settings.rules_dir, builtin=settings.builtin_tables)
    registry.load()

    app.state.settings = settings
    app.state.registry = registry
    app.state.service = TransliterationService(
        registry,
        normalizer=TextNormalizer(unicode_nfc=settings.normalize_unicode),
        router=ScriptRouter(),
        case=settings.default_case,
    )
    return app


@pytest.fixture
def app():
    """App without authentication."""
    return create_test_app(require_auth=False)


@pytest.fixture
def app_with_auth():
    """App with authentication enabled."""
    return create_test_app(require_auth=True)


@pytest.fixture
def rules_dir(tmp_path):
    """Empty directory for rule files."""
    d = tmp_path / "rules"
    d.mkdir()
    return d


@pytest.fixture
def write_rules():
    """Writes a JSON rule file and returns its path."""
    def _write(directory, name: str, rules, script: str | None = None, languages=None):
        path = directory / f"{name}.json"
        data = {"script": script or name, "languages": languages or [], "rules": [list(r) for r in rules]}
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def client(app: FastAPI):
    """HTTP client for the app without authentication."""
    return TestClient(app)


@pytest.fixture
def client_with_auth(app_with_auth: FastAPI):
    """HTTP client for the app with authentication."""
    return TestClient(app_with_auth)


@pytest.fixture
def ka_table() -> RuleTable:
    return RuleTable.build([("ka", "ka"), ("a", "a"), ("k", "k")], name="ka")


@pytest.fixture
def valid_payload():
    """Valid request body for POST /v1/transliterate."""
    return {"input": "नमस्ते"}
