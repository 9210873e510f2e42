import logging
from fastapi import APIRouter, Request, HTTPException
from translit.api.schemas import ClusterOut, ScriptInfo, TransliterateRequest, TransliterateResponse
from translit.errors import TransliterationError, UnknownScriptError

router = APIRouter()
log = logging.getLogger("translit")


def _check_auth(req: Request):
    settings = req.app.state.settings
    if not settings.require_auth:
        return
    auth = req.headers.get("authorization", "")
    if not auth.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing Authorization Bearer token")
    token = auth.split(" ", 1)[1].strip()
    if token != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


@router.post("/v1/transliterate", response_model=TransliterateResponse)
def create_transliteration(payload: TransliterateRequest, request: Request):
    _check_auth(request)

    settings = request.app.state.settings
    service = request.app.state.service

    if len(payload.input) > settings.max_input_chars:
        raise HTTPException(
            status_code=422,
            detail=f"input is longer than {settings.max_input_chars} characters",
        )

    try:
        result = service.transliterate(
            payload.input,
            script=payload.script,
            language=payload.language,
            case=payload.case,
            with_clusters=payload.clusters,
        )
    except UnknownScriptError as e:
        raise HTTPException(status_code=404, detail=str(e))

    clusters = None
    if payload.clusters:
        clusters = [
            ClusterOut(start=c.start, length=c.length, output=c.output, matched=c.matched)
            for c in result.clusters
        ]
    return TransliterateResponse(
        input=result.input,
        output=result.output,
        scripts=result.scripts,
        vernacular=result.vernacular,
        table=result.table,
        clusters=clusters,
    )


@router.get("/v1/scripts", response_model=list[ScriptInfo])
def list_scripts(request: Request):
    _check_auth(request)

    registry = request.app.state.registry
    snapshot = registry.snapshot
    return [
        ScriptInfo(
            script=script,
            languages=registry.languages_for(script),
            rules=len(table),
            max_pattern_length=table.max_pattern_length,
            max_fragment_length=table.max_fragment_length,
            source=snapshot.sources.get(script, ""),
        )
        for script, table in sorted(snapshot.tables.items())
    ]


@router.post("/v1/rules/reload")
def reload_rules(request: Request):
    _check_auth(request)

    registry = request.app.state.registry
    try:
        snapshot = registry.reload()
    except TransliterationError as e:
        log.warning("Rule reload rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {"scripts": sorted(snapshot.tables), "rules": sum(len(t) for t in snapshot.tables.values())}
