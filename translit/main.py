import logging
from fastapi import FastAPI
from translit.settings import Settings
from translit.service import TransliterationService
from translit.text.normalize import TextNormalizer
from translit.text.registry import RuleRegistry
from translit.text.script_router import ScriptRouter
from translit.api.routes import router as translit_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logging.getLogger("translit").info("Starting app...")
    logging.getLogger("translit").info(
        "Built-in tables: %s, rules dir: %s", settings.builtin_tables, settings.rules_dir or "-"
    )

    app = FastAPI(title="Rule-table transliteration service", version="0.1.0")

    # Tables are built up front: a bad rule set fails startup, not the first request
    registry = RuleRegistry(rules_dir=settings.rules_dir, builtin=settings.builtin_tables)
    registry.load()

    service = TransliterationService(
        registry,
        normalizer=TextNormalizer(unicode_nfc=settings.normalize_unicode),
        router=ScriptRouter(),
        case=settings.default_case,
    )

    app.state.settings = settings
    app.state.registry = registry
    app.state.service = service

    app.include_router(translit_router)
    return app


app = create_app()
