import warnings

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from urllib.parse import quote

from fs import open_fs
from fs.base import FS
from fs.errors import CreateFailed
from fs.opener.errors import OpenerError

from .candidate import validate_filename
from .config import FinderConfig
from .errors import NotFound, ResolutionError
from .resolver import CasePermutationResolver

def public_url(base_url: str, filename: str) -> str:
	return f"{base_url.rstrip('/')}/{quote(filename, safe='')}"

@dataclass(frozen=True)
class Resolution:
	requested: str | None
	filename: str | None = None
	url: str | None = None
	error: ResolutionError | None = None

	@property
	def found(self) -> bool:
		return self.error is None

	@property
	def status(self) -> int:
		return self.error.status if self.error else 200

	@property
	def body(self) -> str:
		return self.error.message if self.error else self.url or ''

class CaseFinder:
	"""Resolves requested filenames against a case-sensitive base directory.

	Arguments:
		config (FinderConfig): Base directory, public URL and validation limits.
		filesystem (FS): Optional filesystem used instead of opening ``config.base_directory``.
		verbose (bool): Print each probe and the outcome.
	"""

	def __init__(self, config: FinderConfig, filesystem: FS | None = None, verbose: bool = False) -> None:
		self.config = config
		self.verbose = verbose
		self._filesystem = filesystem

	@contextmanager
	def _open_base(self) -> Iterator[FS]:
		if self._filesystem is not None:
			yield self._filesystem
			return

		try:
			base_fs = open_fs(self.config.base_directory)
		except (CreateFailed, OpenerError) as e:
			warnings.warn(f'Unable to open base directory {self.config.base_directory}: {e}', RuntimeWarning)
			raise NotFound('Base directory unavailable') from e

		with base_fs:
			yield base_fs

	def _print_probe(self, variant: str, exists: bool) -> None:
		print(f"Probing '{variant}': {'found' if exists else 'missing'}")

	def find(self, requested: str | None) -> str:
		"""Return the existing case variant of ``requested``.

		Raises:
			ResolutionError: One of its subclasses classifying why no file was found.
		"""
		candidate = validate_filename(requested, self.config.allowed_extensions, self.config.max_letters)

		if self.verbose:
			print(f"Resolving '{candidate}' ({candidate.letter_count} letters)")

		with self._open_base() as filesystem:
			resolver = CasePermutationResolver(filesystem, self._print_probe if self.verbose else None)
			return resolver.resolve(candidate)

	def resolve(self, requested: str | None) -> Resolution:
		try:
			filename = self.find(requested)
		except ResolutionError as e:
			if self.verbose:
				print(f'{e.status} {e}')
			return Resolution(requested, error=e)

		return Resolution(requested, filename, public_url(self.config.base_url, filename))
