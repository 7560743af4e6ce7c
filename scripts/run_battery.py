#!/usr/bin/env python3
"""
wordrng Statistical Battery

Usage:
    python scripts/run_battery.py
    python scripts/run_battery.py --config configs/default.yaml
    python scripts/run_battery.py --engine pcg32 --seed 7 --draws 20000
    python scripts/run_battery.py --all-engines --draws 20000
    python scripts/run_battery.py --config configs/default.yaml --dry-run

Exits with status 1 if any check fails.
"""

import argparse
import sys
import time
from dataclasses import replace
from datetime import datetime
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordrng.config.schema import WordRngConfig, EngineConfig
from wordrng.config.load import load_config, save_config
from wordrng.config.hashing import config_signature, hash_config
from wordrng.core.exceptions import WordRngError
from wordrng.core.rng import RandomGenerator
from wordrng.diagnostics import create_logger, run_battery
from wordrng.engines import create_default_registry


def parse_args():
    parser = argparse.ArgumentParser(description="Run statistical self-checks on wordrng engines")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--engine", type=str, default=None, help="Override engine name")
    parser.add_argument("--all-engines", action="store_true", help="Run every registered engine")
    parser.add_argument("--seed", type=int, default=None, help="Override integer seed")
    parser.add_argument("--draws", type=int, default=None, help="Override draws per check")
    parser.add_argument("--output-dir", type=str, default=None, help="Override output directory")
    parser.add_argument("--name", type=str, default=None, help="Run name")
    parser.add_argument("--dry-run", action="store_true", help="Validate config without running")
    return parser.parse_args()


def apply_overrides(config: WordRngConfig, args) -> WordRngConfig:
    """Apply command line overrides, re-running dataclass validation."""
    if args.engine is not None:
        create_default_registry().get_by_name(args.engine)
        config.engine = EngineConfig(name=args.engine)
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.draws is not None:
        config.diagnostics = replace(config.diagnostics, n_draws=args.draws)
    if args.output_dir is not None:
        config.diagnostics = replace(config.diagnostics, output_dir=args.output_dir)
    return config


def setup_run(config: WordRngConfig, name: str = None) -> Path:
    """Create run directory with timestamp."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_name = name or f"battery_{timestamp}"

    output_dir = Path(config.diagnostics.output_dir) / run_name
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / "logs").mkdir(exist_ok=True)

    return output_dir


def main() -> int:
    args = parse_args()

    print("=" * 60)
    print("WORDRNG STATISTICAL BATTERY")
    print("=" * 60)

    try:
        if args.config:
            print(f"\nLoading config: {args.config}")
            config = load_config(args.config)
        else:
            config = WordRngConfig()
        config = apply_overrides(config, args)
        signature = config_signature(config)
    except (WordRngError, ValueError) as e:
        print(f"\nConfig error: {e}")
        return 2

    print(f"\nConfiguration:")
    print(f"  Engine: {config.engine.name}")
    print(f"  Seed: {config.seed}")
    print(f"  Byte order: {config.sampling.byte_order}")
    print(f"  Draws/check: {config.diagnostics.n_draws}, bins: {config.diagnostics.n_bins}")
    print(f"  Significance: {config.diagnostics.significance}")
    print(f"  Signature: {signature}")
    print(f"  Config hash: {hash_config(config)}")

    if args.dry_run:
        print("\n[DRY RUN] Config validated. Exiting.")
        return 0

    run_dir = setup_run(config, args.name)
    save_config(config, run_dir / "config.yaml")
    log_fn = create_logger(run_dir)
    print(f"Run directory: {run_dir}")

    if args.all_engines:
        engine_names = create_default_registry().names
    else:
        engine_names = [config.engine.name]

    n_failed = 0
    start_time = time.time()
    for engine_name in engine_names:
        if engine_name != config.engine.name:
            config.engine = EngineConfig(name=engine_name)
        rng = RandomGenerator.from_config(config)
        print(f"\n{rng.algorithm_name()} ({rng.word_bits}-bit)")
        with rng:
            results = run_battery(rng, config.diagnostics, log_fn=log_fn)
        n_failed += sum(not r.passed for r in results)
    total_time = time.time() - start_time

    print("\n" + "=" * 60)
    print("RESULTS")
    print("=" * 60)
    print(f"  Engines: {len(engine_names)}")
    print(f"  Failed checks: {n_failed}")
    print(f"  Time: {total_time:.1f}s")

    return 1 if n_failed else 0


if __name__ == "__main__":
    sys.exit(main())
