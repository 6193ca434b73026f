# scripts/run_delium_force.py
from __future__ import annotations

import sys
from pathlib import Path

# ---------------------------------------------------------------------
# Ensure repo root is on PYTHONPATH so `import delium.*` works
# ---------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from delium.online.pipeline_mangle import run_pipeline_mangle, run_pipeline_mangle_chain
from delium.utils.config import load_parameters
from delium.utils.logging import configure_logging_from_params

if __name__ == "__main__":
    parameters_path = REPO_ROOT / "configs" / "parameters.yaml"
    configure_logging_from_params(load_parameters(parameters_path))

    # Static input for smoke test (edit as needed)
    text = "seed"

    for algorithm in ("sha256", "sha512"):
        mangled = run_pipeline_mangle(
            text=text,
            algorithm=algorithm,
            debug=True,
            parameters_path=parameters_path,
        )
        chained = run_pipeline_mangle_chain(
            text=text,
            algorithm=algorithm,
            debug=True,
            parameters_path=parameters_path,
        )
        print(f"[{algorithm}] plain  = {mangled['debug']['plain_hexdigest']}")
        print(f"[{algorithm}] mangle = {mangled['hexdigest']} params={mangled['params']}")
        print(f"[{algorithm}] chain  = {chained['hexdigest']} path={chained['params']['path']!r}")

    # Malformed descriptor comes back as a payload, not an exception
    bad = run_pipeline_mangle_chain(text=text, path="abc#xyz", parameters_path=parameters_path)
    print("malformed:", bad["error"])
