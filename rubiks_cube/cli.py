"""CLI entrypoint for the cube engine."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import yaml

from .engine import CubeEngine
from .errors import CubeError
from .server import CubeHTTPServer
from .state_codec import load_state_file


def load_config(path: str | Path) -> dict:
    """Load YAML config. Returns dict with optional 'server' and 'cube' keys."""
    with open(path, encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return cfg


def build_parser(defaults: dict | None = None) -> argparse.ArgumentParser:
    d = defaults or {}
    srv = d.get("server") or {}
    cube = d.get("cube") or {}

    parser = argparse.ArgumentParser(description="Rubik's cube 3x3 engine")
    sub = parser.add_subparsers(dest="mode", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP cube API")
    serve.add_argument("--config", type=str, default=None, help="Path to YAML config (server + cube)")
    serve.add_argument("--host", default=srv.get("host", "127.0.0.1"))
    serve.add_argument("--port", type=int, default=srv.get("port", 8080))
    serve.add_argument("--access-log", action="store_true", default=bool(srv.get("access_log", False)))
    serve.add_argument("--state-file", type=str, default=cube.get("state_file"))
    serve.add_argument("--scramble-steps", type=int, default=cube.get("scramble_steps", 0))
    serve.add_argument("--seed", type=int, default=cube.get("seed"))

    apply = sub.add_parser("apply", help="Apply a move sequence and print the resulting cube")
    apply.add_argument("sequence", help="Whitespace-separated moves, e.g. \"F R U' F2\"")
    apply.add_argument("--state-file", type=str, default=None)
    apply.add_argument("--compact", action="store_true", help="Print JSON on a single line")

    return parser


def _build_engine(state_file: str | None) -> CubeEngine:
    initial_state = load_state_file(state_file) if state_file else None
    return CubeEngine(initial_state=initial_state)


def run_serve(args: argparse.Namespace) -> None:
    engine = _build_engine(args.state_file)
    if args.scramble_steps > 0:
        moves = engine.scramble(args.scramble_steps, seed=args.seed)
        print(f"scrambled moves={' '.join(moves)}", flush=True)

    server = CubeHTTPServer(engine=engine, host=args.host, port=args.port, access_log=args.access_log)
    print(f"Rubik's cube server listening on http://{server.host}:{server.port}", flush=True)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.shutdown()
        print("server stopped", flush=True)


def run_apply(args: argparse.Namespace) -> str:
    engine = _build_engine(args.state_file)
    engine.apply(args.sequence)
    out = json.dumps(engine.snapshot(), indent=None if args.compact else 2)
    print(out, flush=True)
    return out


def main(argv: list[str] | None = None) -> None:
    # Pre-parse to get --config
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=str, default=None)
    pre_args, _ = pre.parse_known_args(argv)

    defaults = {}
    if pre_args.config:
        defaults = load_config(pre_args.config)

    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    try:
        if args.mode == "serve":
            run_serve(args)
            return
        if args.mode == "apply":
            run_apply(args)
            return
    except (CubeError, OSError) as exc:
        parser.error(str(exc))

    parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    main()
