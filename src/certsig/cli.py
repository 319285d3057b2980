from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List

from .config import load_config
from .crypto.certloader import CertificateLoadError, load_certificate_file
from .signature.algorithm import extract_key_spec
from .signature.errors import UnsupportedSigningKeyError
from .utils.logging import get_logger

log = get_logger("certsig.cli")

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_UNREADABLE = 2


def _inspect_one(path: str) -> Dict[str, Any]:
    try:
        cert = load_certificate_file(path)
    except (OSError, CertificateLoadError) as e:
        log.debug("cannot load %s: %s", path, e)
        return {"path": path, "ok": False, "error": str(e), "exit": EXIT_UNREADABLE}
    try:
        spec = extract_key_spec(cert)
    except UnsupportedSigningKeyError as e:
        log.debug("rejected %s: %s", path, e)
        return {"path": path, "ok": False, "error": str(e), "exit": EXIT_REJECTED}
    except ValueError as e:
        log.debug("unreadable public key in %s: %s", path, e)
        return {"path": path, "ok": False, "error": f"{path}: malformed public key: {e}", "exit": EXIT_UNREADABLE}
    return {"path": path, "ok": True, **spec.to_dict(), "exit": EXIT_OK}


def cmd_inspect(args: argparse.Namespace) -> int:
    results: List[Dict[str, Any]] = [_inspect_one(p) for p in args.certs]
    code = max(r.pop("exit") for r in results)
    if args.json:
        print(json.dumps(results, indent=2))
        return code
    for r in results:
        if r["ok"]:
            print(f"{r['path']}: {r['key_type']}-{r['key_size']} {r['algorithm']}")
        else:
            print(f"{r['path']}: {r['error']}")
    return code


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    p = argparse.ArgumentParser("certsig")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_inspect = sub.add_parser("inspect", help="classify the signing key of certificates")
    p_inspect.add_argument("certs", nargs="+", metavar="CERT")
    p_inspect.add_argument("--json", action=argparse.BooleanOptionalAction, default=cfg.output == "json")
    p_inspect.set_defaults(func=cmd_inspect)

    args = p.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
