"""Finds an existing file among the case permutations of a filename."""

from collections.abc import Callable, Iterator

from fs.base import FS
from fs.errors import FSError

from .candidate import Candidate, is_letter
from .errors import NotFound

def letter_positions(text: str) -> list[int]:
	return [i for i, c in enumerate(text) if is_letter(c)]

def apply_mask(text: str, positions: list[int], mask: int) -> str:
	"""Set the case of each letter position from the matching bit of ``mask``.

	Bit ``i`` (least significant first) controls ``positions[i]``: set means
	uppercase, clear means lowercase. Other characters are copied unchanged.
	"""
	variant = list(text)
	for i, pos in enumerate(positions):
		variant[pos] = variant[pos].upper() if mask & (1 << i) else variant[pos].lower()
	return ''.join(variant)

def case_permutations(text: str) -> Iterator[str]:
	"""Yield every case variant of ``text``, all lowercase first, all uppercase last.

	Variants are produced lazily in increasing mask order, so a consumer that
	stops early never pays for the rest of the ``2^L`` sequence.
	"""
	positions = letter_positions(text)
	for mask in range(1 << len(positions)):
		yield apply_mask(text, positions, mask)

class CasePermutationResolver:
	"""Probes a filesystem for the first existing case variant of a candidate.

	Arguments:
		filesystem (FS): The filesystem holding the files, rooted at the base directory.
		on_probe (Callable): Optional callback receiving each variant and its probe result.

	Note:
		A successful probe says nothing about the file still existing when it
		is later opened.
	"""

	def __init__(self, filesystem: FS, on_probe: Callable[[str, bool], None] | None = None) -> None:
		self._filesystem = filesystem
		self._on_probe = on_probe
		self.variants_probed = 0

	def probe(self, variant: str) -> bool:
		try:
			exists = self._filesystem.isfile(variant)
		except (FSError, ValueError):
			# Unreadable entries and unrepresentable names (e.g. embedded NUL) do not exist
			exists = False

		self.variants_probed += 1
		if self._on_probe:
			self._on_probe(variant, exists)

		return exists

	def resolve(self, candidate: Candidate | str) -> str:
		self.variants_probed = 0

		for variant in case_permutations(str(candidate)):
			if self.probe(variant):
				return variant

		raise NotFound(f"No case variant of '{candidate}' exists")
