# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import sys
import logging
import argparse

from .core import Collection, collection
from .log import logger, _exc_summary

class _ArgParser:
	'''Argument parser for when this package is run with arguments instead of imported.'''

	parser = argparse.ArgumentParser(
		prog="arraykit",
		description="Filter, dedupe, and combine a list of words. Operations are applied in the order they are listed below.",
		epilog="(c) 2025 Joe Walter",
		fromfile_prefix_chars="!",
	)

	parser.add_argument("elements", nargs="*", type=str, help="The elements of the collection. Each argument is split on whitespace.")

	parser.add_argument("-r", "--remove", metavar="element", type=str, default=None, help="Remove every element equal to this one.")
	parser.add_argument("--replace", metavar=("old", "new"), nargs=2, type=str, default=None, help="Replace every element equal to 'old' with 'new'.")
	parser.add_argument("--dif", metavar="elements", nargs="+", type=str, default=None, help="Remove every element that is in this list.")
	parser.add_argument("--cut", metavar="elements", nargs="+", type=str, default=None, help="Keep only the elements that are in this list.")
	parser.add_argument("--concat", metavar="elements", nargs="+", type=str, default=None, help="Append these elements.")
	dedup = parser.add_mutually_exclusive_group()
	dedup.add_argument("-u", "--uniq", action="store_true", default=False, help="Remove duplicates, keeping the first occurrence of each element in its place.")
	dedup.add_argument("-U", "--fast-uniq", action="store_true", default=False, help="Sort, then remove duplicates.")
	parser.add_argument("--reverse", action="store_true", default=False, help="Reverse the order of the elements.")

	parser.add_argument("-c", "--count", metavar="element", type=str, default=None, help="Print how many elements are equal to this one instead of the elements.")
	parser.add_argument("-e", "--equality", choices=["loose", "strict", "identity"], default="loose", help="How elements are compared. (Defaults to \"loose\".)")
	parser.add_argument("--debug", action="store_true", default=False, help="Print what each operation did.")

	@staticmethod
	def parse(args:list[str]) -> argparse.Namespace:
		'''Parse the command line, joining every multi-word argument into one whitespace-separated string.'''

		parsed_args = _ArgParser.parser.parse_args(args)

		parsed_args.elements = " ".join(parsed_args.elements)
		for key in ("dif", "cut", "concat"):
			val = getattr(parsed_args, key)
			if isinstance(val, list):
				setattr(parsed_args, key, " ".join(val))

		return parsed_args

def run(parsed_args:argparse.Namespace) -> Collection|int:
	'''Apply the operations selected on the command line. Returns the resulting collection, or the count if `--count` was given.'''

	col = collection(parsed_args.elements, equality=parsed_args.equality)

	if parsed_args.remove is not None:
		col.remove_(parsed_args.remove)
	if parsed_args.replace is not None:
		col.replace_(*parsed_args.replace)
	if parsed_args.dif is not None:
		col.dif_(parsed_args.dif)
	if parsed_args.cut is not None:
		col.cut_(parsed_args.cut)
	if parsed_args.concat is not None:
		col.concat_(parsed_args.concat)
	if parsed_args.uniq:
		col.uniq_()
	if parsed_args.fast_uniq:
		col.fast_uniq_()
	if parsed_args.reverse:
		col.reverse_()

	if parsed_args.count is not None:
		return col.count(parsed_args.count)
	return col

def main(args:list[str]) -> None:
	'''Run the command line program and print its result.'''

	try:
		parsed_args = _ArgParser.parse(args)

		if parsed_args.debug:
			logger.setLevel(logging.DEBUG)

		logger.debug(f"{parsed_args=}")

		result = run(parsed_args)
		logger.info(str(result))

		sys.exit(0)

	except KeyboardInterrupt:
		sys.exit(1)
	except (TypeError, ValueError) as e:
		logger.critical(_exc_summary(e))
		sys.exit(1)
	except Exception as e:
		logger.critical("An unexpected error occurred.", exc_info=True)
		sys.exit(1)

def _console_main() -> None:
	main(sys.argv[1:])

if __name__ == "__main__":
	main(sys.argv[1:])
