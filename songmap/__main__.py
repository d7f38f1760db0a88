import argparse
import importlib.util
import logging
import os
import random
import typing

import yaml

import songmap.compiler
import songmap.constants


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def load_level (level_path: str) -> typing.Callable[[songmap.compiler.Session], None]:

	"""
	Import a level script and return its ``build(session)`` function.
	"""

	spec = importlib.util.spec_from_file_location("songmap_level", level_path)

	if spec is None or spec.loader is None:
		raise ImportError(f"Cannot load level script {level_path}")

	module = importlib.util.module_from_spec(spec)
	spec.loader.exec_module(module)

	build = getattr(module, "build", None)

	if not callable(build):
		raise AttributeError(f"Level script {level_path} does not define build(session)")

	return build


def build_songmap (level_path: str, config: dict) -> songmap.compiler.Songmap:

	"""
	Run a level script against a fresh session configured from ``config``.
	"""

	settings = config.get('songmap', {}) or {}

	bpm = settings.get('bpm', songmap.constants.DEFAULT_BPM)
	skip = settings.get('skip', 0.0)
	seed = settings.get('seed')

	session = songmap.compiler.Session(
		songmap = songmap.compiler.Songmap(bpm=bpm, skip=skip),
		rng = random.Random(seed)
	)

	logger.info(f"Building {level_path} at {bpm} BPM (seed {seed})")

	load_level(level_path)(session)

	logger.info(f"Built {len(session.songmap)} commands")

	return session.songmap


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point: build a level script into a songmap JSON file.
	"""

	parser = argparse.ArgumentParser(prog="songmap", description="Compile a level script into a songmap")
	parser.add_argument("level", help="Path to a level script defining build(session)")
	parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")
	parser.add_argument("--output", default=None, help="Output JSON path (overrides output.path in the config)")
	args = parser.parse_args(argv)

	config = load_config(args.config)
	output_path = args.output or (config.get('output', {}) or {}).get('path', 'songmap.json')

	result = build_songmap(args.level, config)
	result.save_json(output_path)


if __name__ == "__main__":
	main()
