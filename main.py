"""
CLI entrypoint for the weak-cryptography scan.

This script performs the following steps:
- loads .env (optional), configs/scan.yaml
- resolves the taxonomy registry (built-in or from YAML)
- with --name: classifies the given names and logs the results
- otherwise: creates a per-run output folder under outputs/,
  classifies every candidate in the input table,
  writes findings and summary JSON, and logs a human-readable summary
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import (
    classify_candidates,
    log_scan_summary,
    resolve_scan_columns,
    select_findings,
    serialize_findings,
    summarize_scan,
)
from application.constants import (
    CONFIG_SNAPSHOT_FILENAME,
    FINDINGS_FILENAME,
    IS_WEAK_COL,
    LOG_FILENAME,
    SUMMARY_FILENAME,
)
from domain.algorithms import Classifier
from infrastructure.config import ScanConfig, load_scan_config
from infrastructure.constants import SCAN_FILE
from infrastructure.io import ensure_exists, read_table, write_json
from infrastructure.observability import (
    clear_source_context,
    configure_logging,
    get_log_context,
    make_run_tag,
    set_log_context,
)

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Classify cryptographic algorithm names and report weak ones")
    p.add_argument(
        "--config",
        type=str,
        default=str(SCAN_FILE),
        help="Path to scan.yaml (default: configs/scan.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded when present (default: .env)",
    )
    p.add_argument(
        "--name",
        action="append",
        default=[],
        help="Classify this name and exit (repeatable). Skips the table scan.",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def _classify_names(classifier: Classifier, names: list[str]) -> int:
    for raw in names:
        identity = classifier.classify(raw)
        if identity is None:
            logger.info("%r: no match", raw)
        else:
            logger.info(
                "%r: category=%s name=%s weak=%s",
                raw,
                identity.category.value,
                identity.name,
                identity.is_weak,
            )
    return 0


def _run_scan(cfg: ScanConfig, args: argparse.Namespace) -> int:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{cfg.input_file_path.stem}"

    run_dir = cfg.output_root / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id, source=cfg.input_file_path)

    logger.info("Starting scan: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    # Snapshot the resolved config together with the run context
    write_json(run_dir / CONFIG_SNAPSHOT_FILENAME, {**cfg.model_dump(mode="json"), "run": get_log_context()})

    logger.info("Loading candidate names from %s...", cfg.input_file_path)
    candidates_df = read_table(cfg.input_file_path)
    logger.info("Candidate table loaded: %d rows, %d columns", candidates_df.shape[0], candidates_df.shape[1])

    name_col, location_cols = resolve_scan_columns(cfg, candidates_df)

    classifier = Classifier(cfg.registry)
    scanned_df = classify_candidates(classifier, candidates_df, name_col)
    findings_df = select_findings(scanned_df, weak_only=cfg.weak_only, categories=cfg.categories)

    findings_path = serialize_findings(
        findings_df,
        name_col=name_col,
        location_cols=location_cols,
        findings_path=run_dir / FINDINGS_FILENAME,
    )

    summary = summarize_scan(scanned_df)
    summary_path = write_json(run_dir / SUMMARY_FILENAME, summary)

    log_scan_summary(
        summary=summary,
        n_findings=len(findings_df),
        findings_path=findings_path,
        summary_path=summary_path,
    )
    logger.info("Detailed log: %s", log_path)

    clear_source_context()

    n_weak_findings = int(findings_df[IS_WEAK_COL].eq(True).sum())
    if cfg.fail_on_weak and n_weak_findings > 0:
        logger.error("fail_on_weak=True and %d weak algorithm findings were reported.", n_weak_findings)
        return 1
    return 0


def main() -> int:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    if args.name:
        configure_logging(console_level=getattr(logging, args.console_level))
        # Ad-hoc mode works without scan.yaml; use its registry when the file exists
        config_path = Path(args.config)
        registry_cfg = load_scan_config(config_path) if config_path.exists() else None
        classifier = Classifier(registry_cfg.registry if registry_cfg is not None else None)
        return _classify_names(classifier, args.name)

    config_path = Path(args.config)
    ensure_exists(config_path, "scan.yaml")
    cfg = load_scan_config(config_path)
    return _run_scan(cfg, args)


if __name__ == "__main__":
    raise SystemExit(main())
