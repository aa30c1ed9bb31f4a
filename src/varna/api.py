"""HTTP API for varna."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from varna import __version__
from varna.config import load_config
from varna.core import analyze_word, homorganic_verdict
from varna.models import (
    AnalyzeRequest,
    Classification,
    HealthResponse,
    NormalizeRequest,
    NormalizeResponse,
    PratyaharaResponse,
    RuleVerdict,
    Script,
    WordAnalysis,
)
from varna.phonology import classify, expand_pratyahara
from varna.scripts import detect_script, normalize


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="varna",
        version=__version__,
        description="Sanskrit phonological analysis service API.",
    )
    config = load_config()

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.post("/v1/analyze", response_model=WordAnalysis, tags=["analysis"])
    def analyze(request: AnalyzeRequest) -> WordAnalysis:
        if request.strict is None:
            request = request.model_copy(update={"strict": config.strict_validation})
        try:
            return analyze_word(request)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.post("/v1/normalize", response_model=NormalizeResponse, tags=["analysis"])
    def normalize_word(request: NormalizeRequest) -> NormalizeResponse:
        target = request.target_script or Script.IAST
        return NormalizeResponse(
            word=request.word,
            source_script=detect_script(request.word),
            target_script=target,
            normalized=normalize(request.word, target) or "",
        )

    @app.get("/v1/classify", response_model=Classification, tags=["phonology"])
    def classify_phoneme(phoneme: str) -> Classification:
        return classify(phoneme)

    @app.get("/v1/homorganic", response_model=RuleVerdict, tags=["phonology"])
    def homorganic(first: str, second: str) -> RuleVerdict:
        return homorganic_verdict(first, second)

    @app.get("/v1/pratyahara/{name}", response_model=PratyaharaResponse, tags=["phonology"])
    def pratyahara(name: str, script: Script = Script.IAST) -> PratyaharaResponse:
        phonemes = expand_pratyahara(name, script)
        if not phonemes:
            raise HTTPException(status_code=404, detail=f"Unknown pratyahara: {name}")
        return PratyaharaResponse(name=name, script=script, phonemes=list(phonemes))

    return app


app = create_app()
