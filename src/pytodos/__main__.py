from __future__ import annotations

import argparse
from typing import Optional, Sequence

from pytodos.core.config import AppConfig, load_config
from pytodos.core.logging import get_app_logger, init_logging
from pytodos.core.telemetry import init_telemetry
from pytodos.runtime.mount import store_name_for
from pytodos.runtime.storage import FileStorage


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="pytodos", description="Task list with persisted state.")
	p.add_argument("--config", help="JSON config file")
	p.add_argument("--storage", dest="storage_path", help="storage file (default ~/.pytodos/storage.json)")
	p.add_argument("--container", dest="container_id", help="container id; separate ids keep separate lists")
	p.add_argument("--log-level", dest="log_level", help="DEBUG, INFO, WARNING, ...")
	p.add_argument("--reset", action="store_true", help="clear the stored list before starting")
	return p


def build_config(args: argparse.Namespace) -> AppConfig:
	return load_config(
		args.config,
		overrides={
			"storage.path": args.storage_path,
			"container_id": args.container_id,
			"logging.level": args.log_level,
		},
	)


def main(argv: Optional[Sequence[str]] = None) -> None:
	args = build_parser().parse_args(argv)
	cfg = build_config(args)

	init_logging(cfg)
	log = get_app_logger()
	telemetry = init_telemetry(cfg, get_app_logger("telemetry"))

	storage = FileStorage(cfg.storage_path())
	if args.reset:
		storage.clear(store_name_for(str(cfg.get("container_id", "app"))))
		log.info("Cleared stored list in %s", storage.path)

	# Tk is only imported once we actually open a window.
	from pytodos.ui.window import App

	app = App(cfg, storage=storage, telemetry=telemetry)
	app.run()


if __name__ == "__main__":
	main()
