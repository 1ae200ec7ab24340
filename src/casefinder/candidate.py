"""Validation of requested filenames before any filesystem access."""

from collections.abc import Iterable
from dataclasses import dataclass
from string import ascii_letters

from fs.path import basename

from .config import DEFAULT_ALLOWED_EXTENSIONS, DEFAULT_MAX_LETTERS
from .errors import CandidateTooComplex, DisallowedExtension, MissingParameter

def is_letter(char: str) -> bool:
	return char in ascii_letters

@dataclass(frozen=True)
class Candidate:
	"""A single, traversal free filename component with an allowed extension."""
	text: str
	extension: str
	letter_count: int

	def __str__(self) -> str:
		return self.text

def confine(requested: str) -> str:
	"""Reduce ``requested`` to its final path component.

	Both ``/`` and ``\\`` count as separators. A final component of ``.``
	or ``..`` reduces to the empty string.
	"""
	name = basename(requested.replace('\\', '/').rstrip('/'))
	return '' if name in ('.', '..') else name

def extension_of(name: str) -> str:
	_, dot, extension = name.rpartition('.')
	return extension.lower() if dot else ''

def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
	return frozenset(e.lower().lstrip('.') for e in extensions)

def validate_filename(
		requested: str | None,
		allowed_extensions: Iterable[str] = DEFAULT_ALLOWED_EXTENSIONS,
		max_letters: int = DEFAULT_MAX_LETTERS) -> Candidate:
	"""Turn a raw request value into a :class:`Candidate`.

	Raises:
		MissingParameter: ``requested`` is absent or empty.
		DisallowedExtension: the extension of the final path component is not allowed.
		CandidateTooComplex: the name has more than ``max_letters`` letters.
	"""
	if not requested:
		raise MissingParameter

	name = confine(requested)

	if (extension := extension_of(name)) not in normalize_extensions(allowed_extensions):
		raise DisallowedExtension(f"Extension '{extension}' not allowed")

	if (letter_count := sum(1 for c in name if is_letter(c))) > max_letters:
		raise CandidateTooComplex(f'{letter_count} letters exceeds the limit of {max_letters}')

	return Candidate(name, extension, letter_count)
