"""Makes a Filesystem that finds top level files by case permutation."""

from typing import Generic, Mapping, TypeVar

from fs.base import FS
from fs.path import iteratepath, normpath
from fs.wrapfs import WrapFS

from .candidate import is_letter
from .config import DEFAULT_MAX_LETTERS
from .errors import NotFound
from .resolver import CasePermutationResolver

_F = TypeVar("_F", bound=FS, covariant=True)

class WrapCasePermutation(WrapFS[_F], Generic[_F]):
	"""Makes a Filesystem that finds top level files by case permutation.

	Arguments:
		fs (FS): A filesystem instance.
		max_letters (int): Names with more letters than this are never permuted.
	Returns:
		FS: A version of ``fs`` where a missing top level file is looked up
		among the case variants of its name.

	Note:
		Only single component paths are permuted, and the directory is never
		listed. If multiple case variants exist, the first one in permutation
		order (all lowercase first) is used.

		``getmeta()`` reports ``case_insensitive`` for the whole filesystem,
		but paths below the top level and names with more than
		``max_letters`` letters are still matched case sensitively.
	"""

	wrap_name = "case-permutation"

	def __init__(self, wrap_fs: _F, max_letters: int = DEFAULT_MAX_LETTERS) -> None:
		super().__init__(wrap_fs)
		self._passthru = self.delegate_fs().getmeta().get('case_insensitive', False)
		self._max_letters = max_letters

	def delegate_path(self, path: str) -> tuple[_F, str]:
		if not self._passthru and not self.delegate_fs().exists(path):
			if (new_path := self.checkpath(path)):
				path = new_path

		return self._wrap_fs, path

	def checkpath(self, path: str) -> str | None:
		try:
			parts = iteratepath(normpath(path))
		except ValueError:
			return None

		if len(parts) != 1 or sum(1 for c in parts[0] if is_letter(c)) > self._max_letters:
			return None

		try:
			return CasePermutationResolver(self.delegate_fs()).resolve(parts[0])
		except NotFound:
			return None

	def getmeta(self, namespace: str = "standard") -> Mapping[str, object]:
		meta = dict(self.delegate_fs().getmeta(namespace))

		if not self._passthru and namespace == "standard":
			meta.update(case_insensitive=True)

		return meta
