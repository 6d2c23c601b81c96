import argparse
import logging
import random
import sys
import typing

import citypop.constants
import citypop.download
import citypop.options


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args (argv: typing.Optional[typing.List[str]] = None) -> argparse.Namespace:

	"""
	Parse command line arguments. Flags override values from the config file.
	"""

	parser = argparse.ArgumentParser(prog="citypop", description="Generate a city pop chord progression as a MIDI file.")
	parser.add_argument("--config", default="citypop.yaml", help="YAML config file (default: citypop.yaml)")
	parser.add_argument("--era", choices=citypop.constants.ERAS)
	parser.add_argument("--style", choices=citypop.constants.STYLES)
	parser.add_argument("--artist", dest="artist_influence", help="Artist influence, e.g. 'Tatsuro Yamashita'")
	parser.add_argument("--complexity", type=float)
	parser.add_argument("--seed", type=int, help="Seed for repeatable output")
	parser.add_argument("--output", dest="output_dir", help="Directory for the .mid file (default: current directory)")

	return parser.parse_args(argv)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the citypop command.
	"""

	args = parse_args(argv)

	try:
		config = citypop.options.load_config(args.config)
		options = citypop.options.GenerationOptions.from_dict(config.get("generation")).merged(
			era = args.era,
			style = args.style,
			artist_influence = args.artist_influence,
			complexity = args.complexity
		)

	except (TypeError, ValueError) as e:
		logger.error(f"Invalid configuration: {e}")
		return 2

	seed = args.seed if args.seed is not None else config.get("seed")
	rng = random.Random(seed) if seed is not None else None
	output_dir = args.output_dir or config.get("output_dir") or "."

	try:
		with citypop.download.generate_and_download(options, rng=rng) as download:
			download.save(output_dir)

	except citypop.download.GenerationError as e:
		logger.error(str(e))
		return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
