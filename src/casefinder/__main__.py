import sys

from argparse import ArgumentParser, ArgumentTypeError
from pathlib import Path

from fs.opener import registry
from fs.opener.errors import UnsupportedProtocol

from .config import DEFAULT_ALLOWED_EXTENSIONS, DEFAULT_MAX_LETTERS, FinderConfig
from .finder import CaseFinder

def _base_directory(path: str) -> str:
	# FS URLs such as mem:// or osfs://... are opened as given
	if '://' in path:
		protocol = path.split('://', 1)[0]
		try:
			registry.get_opener(protocol)
		except UnsupportedProtocol as e:
			raise ArgumentTypeError(e)
		return path

	try:
		if (resolved_path := Path(path).resolve(True)).is_dir():
			return str(resolved_path)
		else:
			raise ValueError(f'{path} is not a directory')
	except Exception as e:
		raise ArgumentTypeError(e)

def _extension(extension: str) -> str:
	if not (normalized := extension.lower().lstrip('.')) or any(c in normalized for c in './\\'):
		raise ArgumentTypeError(f'Invalid extension: {extension}')

	return normalized

def _max_letters(value: str) -> int:
	try:
		if (max_letters := int(value)) < 0:
			raise ValueError
		return max_letters
	except ValueError:
		raise ArgumentTypeError(f'Invalid letter limit: Must be a non-negative integer')

def _main(argv: list[str] | None = None) -> int:
	parser = ArgumentParser(prog = 'casefinder', description = 'Find a file by trying every letter case of its name')
	parser.add_argument('base_directory', type = _base_directory, help = 'Directory holding the files')
	parser.add_argument('image', type = str, help = 'Requested filename')
	parser.add_argument('-b', '--base-url', type = str, default = '', help = 'Public URL of the base directory')
	parser.add_argument('-e', '--extensions', type = _extension, nargs = '+', help = f"Allowed extensions (default: {' '.join(sorted(DEFAULT_ALLOWED_EXTENSIONS))})")
	parser.add_argument('-m', '--max-letters', type = _max_letters, default = DEFAULT_MAX_LETTERS, help = 'Refuse names with more letters than this')
	parser.add_argument('-v', '--verbose', action = 'store_true', help = 'enable verbose output')

	args = parser.parse_args(argv)

	config = FinderConfig(
		base_directory=args.base_directory,
		base_url=args.base_url,
		allowed_extensions=frozenset(args.extensions) if args.extensions else DEFAULT_ALLOWED_EXTENSIONS,
		max_letters=args.max_letters)

	resolution = CaseFinder(config, verbose=args.verbose).resolve(args.image)

	if not resolution.found:
		print(f'{resolution.status} {resolution.body}', file=sys.stderr)
		return 1

	print(resolution.body)
	return 0

if __name__ == '__main__':
	sys.exit(_main())
