# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import sys
import logging

# Summary of logging levels used in this package:
# DEBUG    = what an operation did to a collection (elements removed, added, reordered)
# INFO     = command line output
# WARNING  = not used
# ERROR    = not used
# CRITICAL = Exception raised which halted the command line program

def _exc_summary(e) -> str:
	'''
	Get a one-line summary of an `Exception`.

	>>> _exc_summary(ValueError("bad value"))
	'ValueError: bad value'
	>>> _exc_summary(KeyError())
	'KeyError'
	'''

	error_type = type(e).__name__
	message = str(e)
	if message:
		return f"{error_type}: {message}"
	return error_type

def _count_noun(n:int, noun:str = "element") -> str:
	'''
	>>> _count_noun(1)
	'1 element'
	>>> _count_noun(0)
	'0 elements'
	'''

	return f"{n} {noun}" if n == 1 else f"{n} {noun}s"

class _DebugInfoFilter(logging.Filter):
	'''Logging filter that only allows DEBUG and INFO records to pass.'''
	def filter(self, record):
		return logging.DEBUG <= record.levelno <= logging.INFO

class _ConsoleFormatter(logging.Formatter):
	BASE_FORMAT = "%(message)s"

	def __init__(self, fmt=BASE_FORMAT, datefmt=None, style="%"):
		super().__init__(fmt, datefmt, style)

	def format(self, record):
		msg = super().format(record)
		if record.levelno == logging.DEBUG:
			msg = "  " + msg.replace("\n", "\n  ").rstrip(" ")
		elif record.levelno == logging.CRITICAL:
			msg = f"*** CRITICAL ***: {msg}"
		return msg

logger = logging.getLogger("arraykit")

def setup_logger():
	if not logger.handlers:
		logger.setLevel(logging.INFO)
		handler_stdout = logging.StreamHandler(sys.stdout)
		handler_stderr = logging.StreamHandler(sys.stderr)
		handler_stdout.addFilter(_DebugInfoFilter())
		handler_stdout.setLevel(logging.DEBUG)
		handler_stderr.setLevel(logging.WARNING)
		handler_stdout.setFormatter(_ConsoleFormatter())
		handler_stderr.setFormatter(_ConsoleFormatter())
		logger.addHandler(handler_stdout)
		logger.addHandler(handler_stderr)

setup_logger()
