# delium/online/pipeline_mangle.py
"""
Mangle pipelines — config-driven entrypoints returning JSON-friendly payloads.

Thin orchestration layer.

Responsibilities:
- Load config (parameters.yaml) when a path is given, else use built-in defaults
- Fill unset call arguments from the `delium` config block
- Run the Digest Mangler / Path-Chain Mangler
- Return an API-friendly payload; input errors come back as `ok=False` payloads
  instead of exceptions

Core logic lives in:
    delium/core/mangle.py
    delium/core/chain.py

Payload shape
  success: {"ok": True, "mode", "algorithm", "hexdigest", "length", "params", ["debug"]}
  failure: {"ok": False, "mode", "error": {"type", "message"}, "params"}

Config problems (missing file, invalid YAML / values) are NOT converted: they raise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from delium.core.chain import mangle_chain
from delium.core.digest import DigestAlgorithm, DigestResult, hex_digest
from delium.core.errors import DeliumError, MalformedPath
from delium.core.mangle import mangle
from delium.core.path import format_path, parse_path
from delium.utils.config import resolve_parameters
from delium.utils.hashing import TextLike, encode_text
from delium.utils.logging import get_logger

logger = get_logger(__name__)


def _error_payload(mode: str, err: DeliumError, params: Dict[str, Any]) -> Dict[str, Any]:
    logger.warning(
        "Delium %s rejected input: %s",
        mode,
        err,
        extra={"error_type": type(err).__name__},
    )
    return {
        "ok": False,
        "mode": mode,
        "error": {"type": type(err).__name__, "message": str(err)},
        "params": params,
    }


def _result_payload(mode: str, result: DigestResult, params: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {"ok": True, "mode": mode}
    out.update(result.to_dict())
    out["params"] = params
    return out


# -----------------------------
# Public entrypoints
# -----------------------------
def run_pipeline_mangle(
    *,
    text: TextLike,
    stride: Optional[int] = None,
    repeat: Optional[int] = None,
    algorithm: Optional[DigestAlgorithm | str] = None,
    debug: bool = False,
    parameters_path: Optional[str | Path] = None,
) -> Dict[str, Any]:
    """
    Run the Digest Mangler with config defaults.

    Args:
      text: input string (or bytes)
      stride / repeat / algorithm: overrides; None -> delium.* from config
      debug: include debug fields (plain digest, input byte length) and log start/done
      parameters_path: parameters.yaml; None -> built-in defaults

    Returns:
      JSON-serializable dict payload.
    """
    cfg = resolve_parameters(parameters_path).delium

    s = cfg.stride if stride is None else stride
    r = cfg.repeat if repeat is None else repeat
    algo_raw = cfg.algorithm if algorithm is None else algorithm
    params: Dict[str, Any] = {
        "stride": s,
        "repeat": r,
        "algorithm": getattr(algo_raw, "value", algo_raw),
    }

    try:
        data = encode_text(text)
        algo = DigestAlgorithm.coerce(algo_raw)
        params["algorithm"] = algo.value

        if debug:
            logger.info(
                "Delium mangle start",
                extra={"input_len": len(data), "stride": s, "repeat": r, "algorithm": algo.value},
            )

        result = mangle(data, s, r, algo)
    except DeliumError as e:
        return _error_payload("mangle", e, params)

    payload = _result_payload("mangle", result, params)
    if debug:
        payload["debug"] = {
            "input_len": len(data),
            "rounds_applied": r,
            "plain_hexdigest": hex_digest(data, algo).decode("ascii"),
        }
        logger.info("Delium mangle done", extra={"hexdigest": result.hexdigest})
    return payload


def run_pipeline_mangle_chain(
    *,
    text: TextLike,
    path: Optional[str] = None,
    algorithm: Optional[DigestAlgorithm | str] = None,
    debug: bool = False,
    parameters_path: Optional[str | Path] = None,
) -> Dict[str, Any]:
    """
    Run the Path-Chain Mangler with config defaults.

    Args:
      text: input string (or bytes)
      path: descriptor override; None -> delium.path from config (must be set there)
      algorithm: override; None -> delium.algorithm from config
      debug: include debug fields (parsed segments, plain digest) and log start/done
      parameters_path: parameters.yaml; None -> built-in defaults

    Returns:
      JSON-serializable dict payload.
    """
    cfg = resolve_parameters(parameters_path).delium

    p = cfg.path if path is None else path
    algo_raw = cfg.algorithm if algorithm is None else algorithm
    params: Dict[str, Any] = {
        "path": p,
        "algorithm": getattr(algo_raw, "value", algo_raw),
    }

    try:
        data = encode_text(text)
        algo = DigestAlgorithm.coerce(algo_raw)
        params["algorithm"] = algo.value

        if p is None:
            raise MalformedPath("no path given and delium.path is not configured")
        segments = parse_path(p)

        if debug:
            logger.info(
                "Delium chain start",
                extra={"input_len": len(data), "segments": len(segments), "algorithm": algo.value},
            )

        result = mangle_chain(data, segments, algo)
    except DeliumError as e:
        return _error_payload("chain", e, params)

    payload = _result_payload("chain", result, params)
    if debug:
        payload["debug"] = {
            "input_len": len(data),
            "segments": [{"suffix": seg.suffix, "stride": seg.stride} for seg in segments],
            "normalized_path": format_path(segments),
            "plain_hexdigest": hex_digest(data, algo).decode("ascii"),
        }
        logger.info("Delium chain done", extra={"hexdigest": result.hexdigest})
    return payload


__all__ = ["run_pipeline_mangle", "run_pipeline_mangle_chain"]
