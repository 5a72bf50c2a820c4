"""
FastAPI REST API Interface
Programmatic access to Xorscope for automation and integration
"""

from typing import List, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from xorscope import __version__
from xorscope.core.codecs import Scheme
from xorscope.core.config import BreakerConfig
from xorscope.core.engine import XorscopeEngine
from xorscope.core.errors import XorscopeError


# Initialize FastAPI app
app = FastAPI(
    title="Xorscope API",
    description="Single-byte and repeating-key XOR cryptanalysis",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware for cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Default engine (singleton); /break builds its own when options are given
engine = XorscopeEngine()


def _parse_scheme(name: str) -> Scheme:
    try:
        return Scheme.from_name(name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))


@app.get("/")
async def root():
    """
    API root endpoint - info
    """
    return {
        "service": "Xorscope API",
        "version": __version__,
        "status": "operational",
        "endpoints": {
            "convert": "/convert",
            "fixed_xor": "/fixed-xor",
            "encrypt": "/encrypt",
            "solve": "/solve",
            "break": "/break",
            "health": "/health",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring
    """
    return {
        "status": "healthy",
        "service": "xorscope-api",
        "version": __version__
    }


@app.post("/convert")
async def convert(
    data: str = Form(..., description="Encoded input"),
    source: str = Form("hex", description="Input encoding"),
    target: str = Form("base64", description="Output encoding")
):
    """
    Re-encode between hex and Base64

    Example:
    ```bash
    curl -X POST "http://localhost:8000/convert" -F "data=49276d" -F "target=base64"
    ```
    """
    try:
        output = engine.convert(data, _parse_scheme(source), _parse_scheme(target))
    except XorscopeError as e:
        raise _bad_request(e)
    return {"result": output.decode('ascii'), "scheme": target}


@app.post("/fixed-xor")
async def fixed_xor(
    lhs: str = Form(..., description="First encoded buffer"),
    rhs: str = Form(..., description="Second encoded buffer"),
    scheme: str = Form("hex", description="Encoding of both buffers")
):
    """
    XOR two equal-length buffers
    """
    try:
        output = engine.fixed_xor(lhs, rhs, _parse_scheme(scheme))
    except XorscopeError as e:
        raise _bad_request(e)
    return {"result": output.decode('ascii'), "scheme": scheme}


@app.post("/encrypt")
async def encrypt(
    plaintext: str = Form(..., description="Plaintext"),
    key: str = Form(..., description="Repeating key"),
    scheme: str = Form("hex", description="Output encoding")
):
    """
    Repeating-key XOR encryption

    Example:
    ```bash
    curl -X POST "http://localhost:8000/encrypt" -F "plaintext=Burning 'em" -F "key=ICE"
    ```
    """
    try:
        output = engine.encrypt(plaintext, key, _parse_scheme(scheme))
    except XorscopeError as e:
        raise _bad_request(e)
    return {"result": output.decode('ascii'), "scheme": scheme}


@app.post("/solve")
async def solve(
    data: str = Form(..., description="Encoded ciphertext"),
    scheme: str = Form("hex", description="Input encoding"),
    top: int = Form(1, description="Number of keys to return")
):
    """
    Brute-force a single-byte XOR key

    Returns the best key(s) with their normality score and plaintext. An
    empty candidate list means no key produced English-like text.
    """
    parsed = _parse_scheme(scheme)
    try:
        if top > 1:
            candidates = engine.rank_single_byte(data, parsed, top_n=top)
        else:
            best = engine.solve_single_byte(data, parsed)
            candidates = [best] if best.found else []
    except XorscopeError as e:
        raise _bad_request(e)

    return {
        "candidates": [
            {"key": c.key, "score": c.score, "text": c.text}
            for c in candidates
        ]
    }


@app.post("/break")
async def break_repeating_key(
    data: str = Form(..., description="Encoded ciphertext"),
    scheme: str = Form("base64", description="Input encoding"),
    preset: Optional[str] = Form(None, description="Breaker preset"),
    min_key_length: Optional[int] = Form(None, description="Smallest key length"),
    max_key_length: Optional[int] = Form(None, description="Largest key length"),
    candidates: Optional[int] = Form(None, description="Key lengths to solve"),
    key_lengths: Optional[List[int]] = Form(None, description="Explicit key lengths")
):
    """
    Break repeating-key XOR

    Returns key-length estimates and one recovered key/plaintext per
    candidate length.
    """
    overrides = {
        'min_key_length': min_key_length,
        'max_key_length': max_key_length,
        'key_length_candidates': candidates,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    try:
        if preset:
            config = BreakerConfig.from_preset(preset, **overrides)
        else:
            config = BreakerConfig(**overrides)
        custom_engine = XorscopeEngine(config=config) if (preset or overrides) else engine

        result = custom_engine.break_ciphertext(data, _parse_scheme(scheme), key_lengths=key_lengths)
    except (XorscopeError, ValueError) as e:
        raise _bad_request(e)

    return result.to_dict()


# Run server with: uvicorn xorscope.interfaces.api:app --reload --host 0.0.0.0 --port 8000
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
